"""Constants and configuration values for FeedbackHub."""

from textwrap import dedent


# Sentiment lexicons
class LexiconConstants:
    """Word lists used by the heuristic polarity classifier.

    Matching is substring containment on the lower-cased comment, so
    "fast" also matches "breakfast".
    """

    POSITIVE_WORDS = (
        "fast", "easy", "love", "great", "helpful", "impressed", "clear",
        "scalable", "affordable", "useful", "transparent", "responsive", "smooth", "good",
    )

    NEGATIVE_WORDS = (
        "confusing", "unclear", "bug", "slow", "hard", "lacking", "limited",
        "outdated", "missing", "inconsistent", "expensive", "unexpected", "difficult", "vague",
    )


# Keyword extraction
class KeywordConstants:
    """Constants for keyword extraction."""

    MAX_KEYWORDS = 8  # keywords returned per polarity
    MIN_TOKEN_LENGTH = 4  # shorter tokens are dropped
    MAX_SUMMARY_THEMES = 5  # keywords listed in the "Top themes" sentence

    STOP_WORDS = frozenset({
        "the", "and", "is", "are", "to", "of", "a", "in", "it", "for", "with", "how", "i",
        "was", "be", "very", "not", "this", "that", "as", "on", "at", "by", "an", "or",
        "from", "they", "we", "you", "my", "our", "your", "their", "sometimes",
    })


# Fixed summary sentences
class SummaryConstants:
    """Summary text for the empty and fallback results."""

    NO_FEEDBACK = "No feedback found."
    POSITIVE_INTRO = "Users highlight strengths and positive experiences."
    NEGATIVE_INTRO = "Users mention pain points and areas for improvement."
    THEMES_PREFIX = "Top themes: "
    NO_THEMES = "none"


# Prompt Constants
class PromptConstants:
    """Constants for the insight prompt and inference call."""

    SYSTEM_PROMPT = "You analyze user feedback about a {family} product and return structured insights."

    USER_PROMPT = dedent("""
    Product: {product}

    Return structured insights following the JSON schema. Use ONLY the feedback provided.

    Feedback:
    {comments}
    """).strip()

    COMMENT_LINE = "{index}. [source={source}] {comment}"

    SCHEMA_NAME = "feedback_insights"
    NO_PAYLOAD_REASON = "Inference returned no JSON payload."


# Error Handling Constants
class ErrorConstants:
    """Constants for error reporting."""

    MAX_ERROR_BODY_LENGTH = 200  # chars of a failed response body kept in errors


# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
