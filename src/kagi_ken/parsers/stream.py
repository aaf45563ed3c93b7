import json
from typing import Any

from fastmcp.utilities.logging import get_logger

from kagi_ken.errors import KagiParseError, KagiUpstreamError

logger = get_logger(__name__)

FRAME_DELIMITER = "\x00"
BYTE_ORDER_MARK = "\ufeff"

NEW_MESSAGE_TAG = "new_message.json:"
FINAL_TAG = "final:"

# Most recent protocol first.
FRAME_TAGS = (NEW_MESSAGE_TAG, FINAL_TAG)

UPSTREAM_ERROR_STATE = "error"
DEFAULT_UPSTREAM_ERROR = "Kagi reported an error while summarizing"


def trim(text: str) -> str:
    """Strip whitespace and byte order marks from both ends of `text`."""
    return text.strip().strip(BYTE_ORDER_MARK).strip()


def split_frames(raw_body: str) -> list[str]:
    """Split a stream body into its non-blank frames."""
    frames = (trim(frame) for frame in raw_body.split(FRAME_DELIMITER))
    return [frame for frame in frames if frame]


def strip_tag(frame: str) -> tuple[str | None, str]:
    """Return the tag a frame starts with, if any, and the rest of the frame."""
    frame = trim(frame)

    for tag in FRAME_TAGS:
        if frame.startswith(tag):
            return tag, trim(frame.removeprefix(tag))

    return None, frame


def select_payload(frames: list[str]) -> str:
    """Pick the JSON text of the most recent tagged frame, or of the last frame if none are tagged."""

    for frame in reversed(frames):
        tag, payload = strip_tag(frame)
        if tag is not None:
            logger.debug(f"Using {tag} frame out of {len(frames)} frames")
            return payload

    _, payload = strip_tag(frames[-1])

    logger.debug(f"No tagged frame out of {len(frames)} frames, using the last one")

    return payload


def resolve_output(payload: dict[str, Any]) -> str:
    """Find the markdown across the field names the summarizer has used over time."""

    output_data = payload.get("output_data")

    candidates = (
        payload.get("md"),
        payload.get("reply"),
        output_data.get("markdown") if isinstance(output_data, dict) else None,
    )

    output = next((candidate for candidate in candidates if candidate is not None), "")

    return output if isinstance(output, str) else str(output)


def extract_summary(raw_body: str) -> dict[str, Any]:
    """Recover the final summary from a streaming summarizer response.

    Args:
        raw_body: The complete NUL-delimited response body.

    Returns:
        A mapping with the summary markdown under `output`.

    Raises:
        KagiParseError: If the body holds no frames, an empty payload, or invalid JSON.
        KagiUpstreamError: If the payload reports an error state.
    """

    frames = split_frames(raw_body)
    if not frames:
        msg = "No summary data received"
        raise KagiParseError(msg)

    payload_text = select_payload(frames)
    if not payload_text:
        msg = "Empty summary received"
        raise KagiParseError(msg)

    try:
        payload = json.loads(payload_text)
    except json.JSONDecodeError as e:
        msg = "Failed to parse summary JSON response"
        raise KagiParseError(msg) from e

    if not isinstance(payload, dict):
        msg = f"Unexpected summary payload of type {type(payload).__name__}"
        raise KagiParseError(msg)

    if payload.get("state") == UPSTREAM_ERROR_STATE:
        reply = payload.get("reply")
        raise KagiUpstreamError(reply if isinstance(reply, str) and reply else DEFAULT_UPSTREAM_ERROR)

    return {"output": resolve_output(payload)}
