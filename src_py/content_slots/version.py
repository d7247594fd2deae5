"""패키지 버전 문자열."""

__version__ = "0.1.0"
