"""Atari 7800 hardware components: memory map, RIOT, MARIA, POKEY, palettes, regions and save states."""

__version__ = "0.1.0"