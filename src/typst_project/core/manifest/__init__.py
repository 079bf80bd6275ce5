"""
typst.toml manifest parsing and validation.

Public API:
    Models:
        - Manifest: The whole manifest, with TOML read/write and discovery
        - Package: The `[package]` table
        - Template: The `[template]` table
        - Author, Contact: Package authors and their contact
        - Category, Discipline: Closed label enumerations

    Constrained strings (constructed only through validation):
        - Ident, GitHubHandle, Website, EmailAddress, License

    Validators:
        - validate_ident, validate_github_handle, validate_website,
          validate_license, parse_author

Example:
    >>> from typst_project.core.manifest import Manifest
    >>> manifest = Manifest.try_find(Path.cwd())
    >>> manifest.package.version if manifest else None
    Version(major=0, minor=1, patch=0, prerelease=None, build=None)
"""

from typst_project.core.manifest.author import Author, Contact, parse_author, parse_contact
from typst_project.core.manifest.categories import (
    ALL_CATEGORIES,
    FUNCTIONAL_CATEGORIES,
    PUBLICATION_CATEGORIES,
    Category,
)
from typst_project.core.manifest.disciplines import ALL_DISCIPLINES, Discipline
from typst_project.core.manifest.email import EmailAddress
from typst_project.core.manifest.exceptions import (
    DeserializeError,
    EmptyContactError,
    EmptyIdentError,
    HandleConsecutiveHyphensError,
    HandleEndsWithHyphenError,
    HandleInvalidCharError,
    HandleStartsWithHyphenError,
    HandleTooLongError,
    InvalidContactError,
    InvalidEmailContactError,
    InvalidGitHubHandleContactError,
    InvalidIdentCharError,
    InvalidWebsiteContactError,
    LicenseExpressionError,
    LicenseReferencerError,
    ManifestError,
    NotOsiApprovedError,
    ParseAuthorError,
    ParseEmailError,
    ParseError,
    ParseGitHubHandleError,
    ParseIdentError,
    ParseLicenseError,
    ParseWebsiteError,
    SerializeError,
    UnclosedContactError,
    WebsiteInvalidCharError,
)
from typst_project.core.manifest.github_handle import GitHubHandle, validate_github_handle
from typst_project.core.manifest.ident import Ident, validate_ident
from typst_project.core.manifest.license import License, validate_license
from typst_project.core.manifest.manifest import Manifest
from typst_project.core.manifest.package import Package, Version
from typst_project.core.manifest.template import Template
from typst_project.core.manifest.validated import ValidatedString
from typst_project.core.manifest.website import Website, validate_website

__all__ = [
    # Models
    "Manifest",
    "Package",
    "Template",
    "Author",
    "Contact",
    "Category",
    "Discipline",
    "Version",
    "ALL_CATEGORIES",
    "FUNCTIONAL_CATEGORIES",
    "PUBLICATION_CATEGORIES",
    "ALL_DISCIPLINES",
    # Constrained strings
    "ValidatedString",
    "Ident",
    "GitHubHandle",
    "Website",
    "EmailAddress",
    "License",
    # Validators
    "validate_ident",
    "validate_github_handle",
    "validate_website",
    "validate_license",
    "parse_author",
    "parse_contact",
    # Exceptions
    "ManifestError",
    "DeserializeError",
    "SerializeError",
    "ParseError",
    "ParseIdentError",
    "EmptyIdentError",
    "InvalidIdentCharError",
    "ParseGitHubHandleError",
    "HandleTooLongError",
    "HandleStartsWithHyphenError",
    "HandleEndsWithHyphenError",
    "HandleConsecutiveHyphensError",
    "HandleInvalidCharError",
    "ParseWebsiteError",
    "WebsiteInvalidCharError",
    "ParseEmailError",
    "ParseLicenseError",
    "LicenseExpressionError",
    "LicenseReferencerError",
    "NotOsiApprovedError",
    "ParseAuthorError",
    "EmptyContactError",
    "UnclosedContactError",
    "InvalidContactError",
    "InvalidGitHubHandleContactError",
    "InvalidWebsiteContactError",
    "InvalidEmailContactError",
]
