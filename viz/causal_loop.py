# rural_health/viz/causal_loop.py
"""Causal loop diagram of the rural workforce system, drawn as inline SVG.

Coordinates live in an 800x500 viewBox. Every variable is a circle of radius
``NODE_RADIUS``; links are straight paths ending in a shared arrowhead marker
with their polarity sign drawn next to them, and each named loop gets a
rounded badge.
"""
from html import escape

from utils.cache import cache_data

VIEW_BOX = (800, 500)
NODE_RADIUS = 60
NODE_FILL, NODE_STROKE = "#e3f2fd", "#1e88e5"

LOOP_COLORS = {
    "R1": "#d32f2f",
    "R2": "#e65100",
    "B1": "#2e7d32",
    "isolation": "#5e35b1",
}

# id -> (label, cx, cy)
NODES = {
    "workforce":  ("Rural Healthcare Workforce", 400, 100),
    "conditions": ("Working Conditions",         200, 250),
    "workload":   ("Workload per HCW",           400, 400),
    "migration":  ("Urban Migration",            600, 250),
    "quality":    ("Quality of Healthcare",      150, 400),
    "isolation":  ("Professional Isolation",     650, 400),
    "incentives": ("Government Incentives",      650, 100),
}

# (source, target, polarity, loop, path, sign position, dashed)
LINKS = [
    ("workforce",  "workload",   "-", "R1", "M400 160 L400 340", (380, 250), True),
    ("workload",   "conditions", "-", "R1", "M340 400 L260 250", (290, 340), False),
    ("conditions", "migration",  "+", "R1", "M260 210 L540 210", (400, 200), False),
    ("migration",  "workforce",  "-", "R1", "M600 190 L460 140", (530, 150), False),
    ("workforce",  "quality",    "+", "R2", "M350 150 L200 350", (270, 260), False),
    ("quality",    "migration",  "-", "R2", "M150 340 L500 230", (330, 270), True),
    ("workforce",  "incentives", "-", "B1", "M340 100 L590 100", (470, 90),  False),
    ("incentives", "migration",  "-", "B1", "M650 160 L550 200", (620, 190), False),
    ("isolation",  "migration",  "+", "isolation", "M650 340 L600 310", (635, 330), False),
]

# loop -> badge top-left corner
BADGES = {
    "R1": (440, 250),
    "R2": (290, 170),
    "B1": (530, 70),
}

def _node(label, cx, cy):
    return (f'<circle cx="{cx}" cy="{cy}" r="{NODE_RADIUS}" fill="{NODE_FILL}" stroke="{NODE_STROKE}" stroke-width="2"/>'
            f'<text x="{cx}" y="{cy}" text-anchor="middle" dominant-baseline="middle" font-size="12" '
            f'font-weight="bold">{escape(label)}</text>')

def _link(polarity, loop, path, sign_xy, dashed):
    color = LOOP_COLORS[loop]
    dash = ' stroke-dasharray="5,3"' if dashed else ""
    x, y = sign_xy
    return (f'<path d="{path}" stroke="{color}" stroke-width="2" fill="none" marker-end="url(#arrowhead)"{dash}/>'
            f'<text x="{x}" y="{y}" text-anchor="middle" fill="{color}" font-weight="bold">{escape(polarity)}</text>')

def _badge(loop, x, y):
    return (f'<rect x="{x}" y="{y}" width="30" height="20" rx="10" ry="10" fill="{LOOP_COLORS[loop]}"/>'
            f'<text x="{x + 15}" y="{y + 10}" text-anchor="middle" dominant-baseline="middle" fill="white" '
            f'font-weight="bold">{escape(loop)}</text>')

def loop_links(loop):
    """Links belonging to one loop, as (source, target, polarity) triples."""
    return [(s, t, p) for s, t, p, l, *_ in LINKS if l == loop]

@cache_data
def build_causal_loop_svg() -> str:
    w, h = VIEW_BOX
    parts = [f'<svg viewBox="0 0 {w} {h}" xmlns="http://www.w3.org/2000/svg">',
             '<defs><marker id="arrowhead" markerWidth="10" markerHeight="7" refX="9" refY="3.5" orient="auto">'
             '<polygon points="0 0, 10 3.5, 0 7"/></marker></defs>']
    parts += [_node(*NODES[n]) for n in NODES]
    parts += [_link(p, l, d, xy, dashed) for _, _, p, l, d, xy, dashed in LINKS]
    parts += [_badge(loop, x, y) for loop, (x, y) in BADGES.items()]
    parts.append("</svg>")
    return "".join(parts)
