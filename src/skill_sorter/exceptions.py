"""Package exceptions."""


class SkillSorterError(Exception):
    """Base class for errors raised by skill_sorter."""


class UnsupportedDocumentError(SkillSorterError):
    """The document type cannot be read."""
