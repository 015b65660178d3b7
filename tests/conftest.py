"""Shared test fixtures."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from svgscene.engine.document import ElementPath


# Sample documents

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

BAR_CHART_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <line x1="18" x2="18" y1="20" y2="10"/>
  <line x1="12" x2="12" y1="20" y2="4"/>
  <line x1="6" x2="6" y1="20" y2="14"/>
</svg>'''

FILLED_RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" fill="#4ECDC4"/>
  <circle cx="50" cy="50" r="20" fill="#FF6B6B"/>
</svg>'''

GRADIENT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" width="100" height="100">
  <defs>
    <linearGradient id="base">
      <stop offset="0%" stop-color="red"/>
      <stop offset="100%" stop-color="blue"/>
    </linearGradient>
    <linearGradient id="derived" xlink:href="#base" x1="0" y1="0" x2="1" y2="0"/>
    <radialGradient id="glow" cx="50%" cy="50%" r="50%">
      <stop offset="0.2" stop-color="#fff"/>
      <stop offset="0.8" stop-color="#000" stop-opacity="0.5"/>
    </radialGradient>
    <linearGradient id="empty"/>
  </defs>
  <rect id="linear" x="0" y="0" width="50" height="20" fill="url(#derived)"/>
  <circle id="radial" cx="50" cy="50" r="25" fill="url(#glow)"/>
  <rect id="blank" width="10" height="10" fill="url(#empty)"/>
</svg>'''

CSS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect id="before" class="accent" width="10" height="10"/>
  <style>
    .accent { fill: green; stroke: #00f; }
    .muted, .quiet { fill: gray; }
  </style>
  <rect id="after" class="accent" width="10" height="10"/>
  <rect id="listed" class="quiet" width="10" height="10"/>
  <rect id="inline" class="accent" style="fill: orange" width="10" height="10"/>
</svg>'''

USE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 100 100">
  <defs>
    <rect id="box" width="10" height="10"/>
  </defs>
  <use id="moved" xlink:href="#box" x="20" y="30"/>
  <use id="dangling" href="#missing"/>
  <use id="self" xlink:href="#self"/>
</svg>'''

TEXT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 100" font-size="20">
  <text id="label" x="100" y="50" text-anchor="middle" fill="red" fill-opacity="0.5">Hello
    <tspan id="span" font-weight="bold" font-style="italic">world</tspan>
  </text>
</svg>'''


def element_path(markup: str) -> ElementPath:
    return ElementPath(ET.fromstring(markup))


def find_by_id(node, node_id):
    from svgscene.engine.scene import iter_nodes

    for n in iter_nodes(node):
        if n.id == node_id:
            return n
    return None


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def smiley_svg() -> str:
    return SMILEY_SVG


@pytest.fixture
def gradient_svg() -> str:
    return GRADIENT_SVG


@pytest.fixture
def css_svg() -> str:
    return CSS_SVG
