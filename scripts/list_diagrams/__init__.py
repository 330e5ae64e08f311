"""list_diagrams — Render the linked-list diagrams used in the documentation.

Produces pixel-exact PNG diagrams (a lone node, a list, and the pointer
walks used to remove an entry) for embedding in markdown.  Every size is
derived from a device pixel ratio so the images stay crisp on high-density
displays.

Usage:
    python scripts/list_diagrams --diagram list         # one diagram
    python scripts/list_diagrams --all --pixel-ratio 2  # all, for 2x screens
    python scripts/list_diagrams --list                 # list available

Requires: pip install numpy matplotlib
"""
