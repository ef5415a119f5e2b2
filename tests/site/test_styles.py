"""Tests for the stylesheet generator."""

from cv2web.site.styles import THEME_COLORS, generate_globals_css


def _block(css: str, selector: str) -> str:
    start = css.index(selector + " {")
    return css[start:css.index("\n}", start)]


def test_resume_colors_override_defaults(resume):
    css = generate_globals_css(resume)
    root = _block(css, ":root")
    assert "--background: #101010;" in root
    assert "--primary: #abcdef;" in root
    assert "--sidebar-primary: #abcdef;" in root
    assert "--foreground: #CECFC7;" in root


def test_radius_only_in_root(resume):
    css = generate_globals_css(resume)
    assert "--radius: 0.5rem;" in _block(css, ":root")
    assert "--radius:" not in _block(css, ".dark")
    assert css.count("--radius: 0.5rem;") == 1


def test_dark_block_matches_root_colors(resume):
    css = generate_globals_css(resume)
    dark = _block(css, ".dark")
    assert "--background: #101010;" in dark
    assert len([line for line in dark.splitlines() if line.startswith("  --")]) == len(THEME_COLORS) + 8


def test_fonts_in_inline_theme(resume):
    theme = _block(generate_globals_css(resume), "@theme inline")
    assert '--font-sans: "Inter Tight", "Inter Tight Fallback";' in theme
    assert "--color-chart-5: var(--chart-5);" in theme
    assert "--radius-xl: calc(var(--radius) + 4px);" in theme


def test_defaults_and_framing():
    css = generate_globals_css({})
    assert css.startswith('@import "tailwindcss";')
    assert css.endswith("}\n")
    assert "--background: #020202;" in css
    assert '--font-mono: "Geist Mono", "Geist Mono Fallback";' in css
    assert "@apply bg-background text-foreground;" in css
