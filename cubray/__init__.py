"""First-person raycasting explorer for .cub scene files, drawn with pygame."""

__version__ = "0.1.0"
__all__ = ["app", "colors", "geometry", "mapfile", "player", "raycast", "render", "textutil"]