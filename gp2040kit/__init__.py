"""LED animations, CRC-32, emulated EEPROM, option records and board presets for arcade-stick controllers."""

__version__ = "0.1.0"