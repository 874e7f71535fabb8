import re
import unicodedata


def make_slug(text: str) -> str:
    """Turn a display string into a lowercase, dash-separated identifier.

    "Intro to X" -> "intro-to-x", "Jürgen Müller" -> "jurgen-muller".
    """
    normalized = unicodedata.normalize("NFKD", text)
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii")
    ascii_text = re.sub(r"[^\w\s-]", "", ascii_text.lower())
    return re.sub(r"[-\s_]+", "-", ascii_text).strip("-")
