"""Tests for the layout generator."""

from cv2web.site.layout import font_import_name, generate_layout


def test_font_import_name():
    assert font_import_name("Geist Mono") == "Geist_Mono"
    assert font_import_name("JetBrains  Mono") == "JetBrains_Mono"
    assert font_import_name("Inter") == "Inter"


def test_layout_uses_resume_fonts(resume):
    layout = generate_layout(resume)
    assert 'import { Inter_Tight, JetBrains_Mono } from "next/font/google"' in layout
    assert "const _sans = Inter_Tight(" in layout
    assert 'title: "Ada Lovelace"' in layout


def test_layout_defaults():
    layout = generate_layout({})
    assert "import { Geist, Geist_Mono }" in layout
    assert 'title: ""' in layout


def test_title_escaped():
    layout = generate_layout({"personal": {"name": 'Bobby "Tables"'}})
    assert 'title: "Bobby &quot;Tables&quot;"' in layout
