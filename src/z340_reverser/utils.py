from typing import Iterable, List


class ConfigurationError(ValueError):
    pass

class TranscriptionLoadError(RuntimeError):
    pass


def wrap_rows(text: str, width: int = 17) -> List[str]:
    """Split text into rows of `width` characters. The last row may be shorter."""
    if width <= 0:
        raise ConfigurationError(f"Row width must be positive, got {width}")
    return [text[i:i + width] for i in range(0, len(text), width)]


def join_rows(rows: Iterable[str]) -> str:
    """Join transcription rows, dropping any whitespace inside or between them."""
    return "".join("".join(row.split()) for row in rows)


def load_transcription(file_path: str, encoding: str = "utf-8") -> str:
    """Load a ciphertext transcription from a text file, one grid row per line."""
    try:
        with open(file_path, "r", encoding=encoding) as f:
            ciphertext = join_rows(f.readlines())
    except UnicodeDecodeError as e:
        raise TranscriptionLoadError(f"Transcription is not valid {encoding}: {file_path}") from e
    if not ciphertext:
        raise TranscriptionLoadError(f"No ciphertext symbols found in: {file_path}")
    return ciphertext
