"""EduGate - permissioned content backend for an educational platform."""

__version__ = "0.1.0"
