# src/skyreader/core/report.py
import pprint

from skyreader.models import ByteSum


def format_byte_sum(byte_sum: ByteSum, width: int = 80) -> str:
    """Pretty debug dump of a ByteSum, nested source record included."""
    return pprint.pformat(byte_sum, width=width)
