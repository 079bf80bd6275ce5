"""Email addresses, validated with the `email-validator` library."""

from email_validator import EmailNotValidError, validate_email

from typst_project.core.manifest.exceptions import ParseEmailError
from typst_project.core.manifest.validated import ValidatedString


class EmailAddress(ValidatedString):
    """
    An RFC 5322 email address such as `martin@typst.app`.

    Only the syntax is checked, the domain is never resolved. The text is
    kept exactly as written.
    """

    @classmethod
    def check(cls, text: str) -> None:
        try:
            validate_email(text, check_deliverability=False)
        except EmailNotValidError as e:
            raise ParseEmailError(str(e)) from e
