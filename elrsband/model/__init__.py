from .classifier import FieldClassifier, looks_like_packet_rate, looks_like_telemetry_ratio
from .field import FieldDescriptor, ParameterSlot, PACKET_RATE, TELEMETRY_RATIO, DEFAULT_SLOTS
from .labels import format_packet_label, format_telemetry_label

__all__ = ["FieldClassifier",
           "looks_like_packet_rate",
           "looks_like_telemetry_ratio",
           "FieldDescriptor",
           "ParameterSlot",
           "PACKET_RATE",
           "TELEMETRY_RATIO",
           "DEFAULT_SLOTS",
           "format_packet_label",
           "format_telemetry_label"]
