# core/utils.py

"""
Repository for program-wide utilities.
"""

import base64
import mimetypes
import random
import string

STUDENT_ID_PREFIX = "STU-"
STUDENT_ID_ALPHABET = string.ascii_uppercase + string.digits


def generate_student_id(rng: random.Random | None = None) -> str:
    rng = rng or random.Random()
    suffix = "".join(rng.choices(STUDENT_ID_ALPHABET, k=4))

    return f"{STUDENT_ID_PREFIX}{suffix}"


def encode_photo_data_uri(file_path: str) -> str:
    """
    Reads an image file and returns it as a base64 data URI.

    Args:
        file_path (str): Path to the image on disk.

    Returns:
        A string of the form `data:<mime type>;base64,<payload>`.

    Raises:
        OSError: If the file cannot be read.
    """
    mime_type, _ = mimetypes.guess_type(file_path)

    with open(file_path, "rb") as f:
        payload = base64.b64encode(f.read()).decode("ascii")

    return f"data:{mime_type or 'application/octet-stream'};base64,{payload}"


def require_number(value: object, field_name: str) -> float:
    """
    Ensures a value is an int or float (bool excluded).

    Raises:
        TypeError: If the value is not numeric.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Invalid input. {field_name} must be a number, got {value!r}.")
    return value
