"""Constants shared across symdelete."""


class Constants:
    """Default values and file format markers."""

    # Language identifier used when none is given
    DEFAULT_LANGUAGE = "und"
    DEFAULT_MAX_EDIT_DISTANCE = 2

    # Above this, delete-variant fan-out makes indexing very memory hungry
    MAX_EDIT_DISTANCE_WARNING = 3

    COMMENT_PREFIX = "#"

    # wordfreq needs a real language code; used when the engine language is "und"
    WORDFREQ_LANGUAGE = "en"
    # Fetch extra words from wordfreq to make up for filtered ones
    WORDFREQ_MULTIPLIER = 2
