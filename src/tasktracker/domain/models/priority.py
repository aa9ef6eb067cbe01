from enum import Enum


class Priority(str, Enum):
    """Task priority. Values are the wire names; members are declared by severity."""

    NONE = "None"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
