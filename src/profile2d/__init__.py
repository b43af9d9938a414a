"""profile2d - 2D profile algebra for closed curve loops.

profile2d works on closed 2D loops made of lines and circular arcs
("blueprints"). It finds how two loops cross each other, organises a flat
list of loops into outer boundaries with holes, and rounds or bevels the
corners of a profile.

Example:
    $ profile2d fillet plate.json --radius 2

This will create plate-fillet.json with every corner of every region
replaced by a tangent arc of radius 2.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
