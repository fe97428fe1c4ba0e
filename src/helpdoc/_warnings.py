"""Warning categories for help rendering."""


class HelpdocWarning(UserWarning):
    """Base category for helpdoc warnings. Filter this to silence all of them."""


class UnknownPlaceholderWarning(HelpdocWarning):
    """A `{{...}}` placeholder in a help string named something the config
    doesn't have. The placeholder is rendered as an empty string."""
