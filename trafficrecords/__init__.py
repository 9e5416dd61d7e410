"""Vehicle-owner, traffic-violation, addressee and accident-evidence records kept in CSV files."""

__version__ = "0.1.0"
__all__ = ["owners", "violations", "addressees", "evidence"]