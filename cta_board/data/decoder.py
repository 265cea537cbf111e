"""Decoder for Train Tracker arrivals XML documents."""

from __future__ import annotations

from dataclasses import dataclass, field
import xml.etree.ElementTree as ET

from cta_board.errors import DecodeError, ProviderError

ETA_TAG = "eta"
STATION_ID_TAG = "staId"
ARRIVAL_TIME_TAG = "arrT"
STOP_DESCRIPTION_TAG = "stpDe"
TIMESTAMP_TAG = "tmst"
ERROR_CODE_TAG = "errCd"
ERROR_NAME_TAG = "errNm"


@dataclass(frozen=True)
class EtaRecord:
    """One upcoming arrival at a stop."""

    station_id: str
    arrival_time: str  # provider format, YYYYMMDD HH:MM:SS
    stop_description: str


@dataclass(frozen=True)
class TrainInfo:
    """Arrivals decoded from a single response, in document order."""

    etas: list[EtaRecord] = field(default_factory=list)
    timestamp: str | None = None


def _child_text(element: ET.Element, tag: str, index: int) -> str:
    child = element.find(tag)
    if child is None:
        raise DecodeError(f"eta #{index} is missing required field '{tag}'")
    return (child.text or "").strip()


def _check_provider_error(root: ET.Element) -> None:
    code_element = root.find(ERROR_CODE_TAG)
    if code_element is None or not (code_element.text or "").strip():
        return
    try:
        code = int(code_element.text.strip())
    except ValueError as exc:
        raise DecodeError(f"Invalid {ERROR_CODE_TAG} value: {code_element.text!r}") from exc
    if code != 0:
        name_element = root.find(ERROR_NAME_TAG)
        message = (name_element.text or "").strip() if name_element is not None else ""
        raise ProviderError(code, message)


def decode(xml_body: str | bytes) -> TrainInfo:
    """Parse an arrivals document into a TrainInfo.

    A document without any ``eta`` elements is valid and yields an empty
    ``etas`` list. Raises DecodeError on unparseable XML, a missing field or a
    non-zero provider error code.
    """
    try:
        root = ET.fromstring(xml_body)
    except ET.ParseError as exc:
        raise DecodeError(f"Arrivals response is not valid XML: {exc}") from exc

    _check_provider_error(root)

    etas = [
        EtaRecord(
            station_id=_child_text(element, STATION_ID_TAG, index),
            arrival_time=_child_text(element, ARRIVAL_TIME_TAG, index),
            stop_description=_child_text(element, STOP_DESCRIPTION_TAG, index),
        )
        for index, element in enumerate(root.findall(ETA_TAG))
    ]

    timestamp_element = root.find(TIMESTAMP_TAG)
    timestamp = None
    if timestamp_element is not None and timestamp_element.text:
        timestamp = timestamp_element.text.strip()

    return TrainInfo(etas=etas, timestamp=timestamp)


__all__ = ["EtaRecord", "TrainInfo", "decode"]
