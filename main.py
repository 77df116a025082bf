"""
Point Cloud Lattice
===================

A cube of colored points spinning about two axes, drawn with a simple
divide-by-depth perspective.

Controls:
    - Up/Down: Move the grid away from / toward the viewer (z_start)
    - PageUp/PageDown: Rotation speed about X
    - Left/Right: Rotation speed about Y
    - [ / ]: Circle radius
    - - / =: Grid resolution
    - 0: Restore default parameters
    - SPACE: Pause/Resume rotation
    - R: Reset rotation angles
    - H: Toggle help text
    - ESC: Quit
"""

from core import Application


def main():
    app = Application()
    app.run()


if __name__ == "__main__":
    main()
