from flispy.reader.parser import parse
from flispy.reader.reader import read, read_number

__all__ = ["parse", "read", "read_number"]
