"""
SPDX license expressions for the `license` field of a package.

Expression syntax (`AND`, `OR`, `WITH`, parentheses) is handled by the
`license-expression` parser and its bundled SPDX symbol table, so only
known license ids and `WITH` exceptions are accepted. On top of that, every
license in the expression must be a concrete SPDX license id (no
`LicenseRef-...` referencers) and must be OSI-approved according to the SPDX
license list.
"""

from typing import Any

from license_expression import (
    ExpressionError,
    LicenseExpression,
    LicenseWithExceptionSymbol,
    get_spdx_licensing,
)
from pydantic import PrivateAttr
from spdx_license_list import LICENSES

from typst_project.core.manifest.exceptions import (
    LicenseExpressionError,
    LicenseReferencerError,
    NotOsiApprovedError,
)
from typst_project.core.manifest.validated import ValidatedString

_LICENSING = get_spdx_licensing()
_REFERENCER_PREFIXES = ("licenseref-", "documentref-")
_SPDX_BY_LOWER_ID = {license_id.lower(): info for license_id, info in LICENSES.items()}


def _leaf_keys(expression: LicenseExpression) -> list[str]:
    keys = []
    for symbol in _LICENSING.license_symbols(expression, unique=False, decompose=False):
        if isinstance(symbol, LicenseWithExceptionSymbol):
            symbol = symbol.license_symbol
        keys.append(symbol.key)
    return keys


def validate_license(text: str) -> LicenseExpression:
    """
    Parse `text` and check every license it requires.

    Referencers are looked for first, since user-defined licenses are not
    part of the SPDX symbol table. The expression is then parsed strictly
    against that table, so unknown ids and exceptions, or a license used
    after `WITH`, are syntax errors. Finally each leaf license is checked in
    the parser's enumeration order, and the first failing leaf determines
    the error.

    Returns:
        The parsed expression

    Raises:
        LicenseExpressionError: If the syntax is invalid, the expression is
            empty, or an id is not in the SPDX license list
        LicenseReferencerError: If a leaf is a `LicenseRef-`/`DocumentRef-`
        NotOsiApprovedError: If a leaf is not OSI-approved
    """
    try:
        expression = _LICENSING.parse(text)
    except ExpressionError as e:
        raise LicenseExpressionError(str(e)) from e

    if expression is None:
        raise LicenseExpressionError("expression is empty")

    for key in _leaf_keys(expression):
        if key.lower().startswith(_REFERENCER_PREFIXES):
            raise LicenseReferencerError(key)

    try:
        expression = _LICENSING.parse(text, validate=True, strict=True)
    except ExpressionError as e:
        raise LicenseExpressionError(str(e)) from e

    for key in _leaf_keys(expression):
        info = _SPDX_BY_LOWER_ID.get(key.lower())
        if info is None:
            raise LicenseExpressionError(f"unknown SPDX license id {key!r}")

        if not info.osi_approved:
            raise NotOsiApprovedError(key)

    return expression


class License(ValidatedString):
    """
    An OSI-approved SPDX license expression such as `MIT OR Apache-2.0`.

    The text is kept as written; the parsed expression is available as
    `expression`.
    """

    _expression: LicenseExpression = PrivateAttr()

    @classmethod
    def check(cls, text: str) -> None:
        validate_license(text)

    def model_post_init(self, __context: Any) -> None:
        self._expression = validate_license(self.root)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, License):
            return NotImplemented
        return self.root == other.root

    def __hash__(self) -> int:
        return hash(self.root)

    @property
    def expression(self) -> LicenseExpression:
        """The parsed SPDX expression."""
        return self._expression

    def license_ids(self) -> list[str]:
        """The license ids this expression requires, in expression order."""
        return _leaf_keys(self._expression)
