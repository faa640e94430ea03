"""Exceptions raised by the status update workflow."""


class IssueStatusError(Exception):
    """Base exception for issuestatus errors."""


class InvalidConfigurationError(IssueStatusError):
    """An input, the project URL, or the event payload is invalid."""


class UnsupportedOwnerTypeError(InvalidConfigurationError):
    """Project URL owner type is neither 'orgs' nor 'users'."""


class RemoteQueryError(IssueStatusError):
    """A read query against the GitHub GraphQL API failed."""


class MissingProjectItemError(IssueStatusError):
    """The triggering issue has no item in the target project."""


class RemoteMutationError(IssueStatusError):
    """The status field mutation failed."""
