"""
Shipwright Deck Generator

A deterministic procedural generator for spaceship deck layouts: rooms
placed and mirrored along the ship's spine, a proximity graph between them,
and a minimum spanning tree to lay corridors along.

Architecture: generate_ship() is the single producer. Renderers and UI are consumers.
"""

__version__ = "0.1.0"
