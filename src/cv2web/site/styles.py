"""
Generates ``app/globals.css``: Tailwind theme variables from the resume's
``colors`` and ``fonts`` sections.
"""

from typing import Any

from cv2web.site.layout import DEFAULT_MONO, DEFAULT_SANS

# (css variable, resume color key, default)
THEME_COLORS = (
    ("background", "background", "#020202"),
    ("foreground", "foreground", "#CECFC7"),
    ("card", "card", "#1a1a1a"),
    ("card-foreground", "cardForeground", "#CECFC7"),
    ("popover", "popover", "#1a1a1a"),
    ("popover-foreground", "popoverForeground", "#CECFC7"),
    ("primary", "primary", "#3E6259"),
    ("primary-foreground", "primaryForeground", "#CECFC7"),
    ("secondary", "secondary", "#2a2a2a"),
    ("secondary-foreground", "secondaryForeground", "#CECFC7"),
    ("muted", "muted", "#2a2a2a"),
    ("muted-foreground", "mutedForeground", "#9a9a9a"),
    ("accent", "accent", "#3E6259"),
    ("accent-foreground", "accentForeground", "#CECFC7"),
    ("destructive", "destructive", "#dc2626"),
    ("destructive-foreground", "destructiveForeground", "#CECFC7"),
    ("border", "border", "#3E6259"),
    ("input", "input", "#2a2a2a"),
    ("ring", "ring", "#3E6259"),
    ("chart-1", "chart1", "#3E6259"),
    ("chart-2", "chart2", "#CECFC7"),
    ("chart-3", "chart3", "#5a7a72"),
    ("chart-4", "chart4", "#8a9a94"),
    ("chart-5", "chart5", "#a0b0aa"),
)

# Sidebar colors reuse the main palette
SIDEBAR_COLORS = (
    ("sidebar", "card", "#1a1a1a"),
    ("sidebar-foreground", "foreground", "#CECFC7"),
    ("sidebar-primary", "primary", "#3E6259"),
    ("sidebar-primary-foreground", "primaryForeground", "#CECFC7"),
    ("sidebar-accent", "secondary", "#2a2a2a"),
    ("sidebar-accent-foreground", "secondaryForeground", "#CECFC7"),
    ("sidebar-border", "border", "#3E6259"),
    ("sidebar-ring", "ring", "#3E6259"),
)

RADIUS_SCALE = (
    ("radius-sm", "calc(var(--radius) - 4px)"),
    ("radius-md", "calc(var(--radius) - 2px)"),
    ("radius-lg", "var(--radius)"),
    ("radius-xl", "calc(var(--radius) + 4px)"),
)


def _declarations(colors: dict[str, Any], table) -> list[str]:
    return [f"  --{var}: {colors.get(key) or default};" for var, key, default in table]


def _theme_block(selector: str, colors: dict[str, Any], with_radius: bool) -> str:
    lines = _declarations(colors, THEME_COLORS)
    if with_radius:
        lines.append("  --radius: 0.5rem;")
    lines += _declarations(colors, SIDEBAR_COLORS)
    return selector + " {\n" + "\n".join(lines) + "\n}"


def _inline_theme(fonts: dict[str, Any]) -> str:
    sans = fonts.get("sans") or DEFAULT_SANS
    mono = fonts.get("mono") or DEFAULT_MONO
    lines = [
        f'  --font-sans: "{sans}", "{sans} Fallback";',
        f'  --font-mono: "{mono}", "{mono} Fallback";',
    ]
    lines += [f"  --color-{var}: var(--{var});" for var, _, _ in THEME_COLORS]
    lines += [f"  --{name}: {value};" for name, value in RADIUS_SCALE]
    lines += [f"  --color-{var}: var(--{var});" for var, _, _ in SIDEBAR_COLORS]
    return "@theme inline {\n" + "\n".join(lines) + "\n}"


def generate_globals_css(resume: dict[str, Any]) -> str:
    colors = resume.get("colors") or {}
    fonts = resume.get("fonts") or {}

    parts = [
        '@import "tailwindcss";\n@import "tw-animate-css";',
        "@custom-variant dark (&:is(.dark *));",
        _theme_block(":root", colors, with_radius=True),
        _theme_block(".dark", colors, with_radius=False),
        _inline_theme(fonts),
        "@layer base {\n"
        "  * {\n"
        "    @apply border-border outline-ring/50;\n"
        "  }\n"
        "  body {\n"
        "    @apply bg-background text-foreground;\n"
        "  }\n"
        "}",
    ]
    return "\n\n".join(parts) + "\n"
