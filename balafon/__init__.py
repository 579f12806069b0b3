"""Building blocks of a small MIDI control language: lexer, syntax nodes, properties, commands, MusicXML, bars and events."""

__version__ = "0.1.0"