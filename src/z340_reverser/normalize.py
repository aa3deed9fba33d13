from typing import Mapping


# CrypTool 2's homophonic substitution analyzer uses ; and | in its key syntax.
CRYPTOOL_SUBSTITUTIONS = {
    ";": "Ä",
    "|": "Ö",
}


def normalize_output(text: str, substitutions: Mapping[str, str] = CRYPTOOL_SUBSTITUTIONS) -> str:
    """Replace every designator symbol with its marker, across the whole string."""
    for designator, marker in substitutions.items():
        text = text.replace(designator, marker)
    return text


def denormalize_output(text: str, substitutions: Mapping[str, str] = CRYPTOOL_SUBSTITUTIONS) -> str:
    """Map the markers back to the original transcription symbols."""
    for designator, marker in substitutions.items():
        text = text.replace(marker, designator)
    return text
