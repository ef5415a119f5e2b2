"""
Generates ``app/page.tsx``: the single resume page with the dot-field
portrait in its header.
"""

from string import Template
from typing import Any

from cv2web.animator.config import DotFieldConfig
from cv2web.site.markup import escape_html, format_multiline, js_number, js_string_array

# (resume canvas key, page constant, DotFieldConfig attribute)
CANVAS_CONSTANTS = (
    ("halftoneSize", "HALFTONE_SIZE", "halftone_size"),
    ("contrast", "CONTRAST", "contrast"),
    ("accentColor", "ACCENT_COLOR", "accent_color"),
    ("mouseRadius", "MOUSE_RADIUS", "mouse_radius"),
    ("repulsionStrength", "REPULSION_STRENGTH", "repulsion_strength"),
    ("returnSpeed", "RETURN_SPEED", "return_speed"),
    ("accentProbability", "ACCENT_PROBABILITY", "accent_probability"),
    ("sizeVariation", "SIZE_VARIATION", "size_variation"),
)

SKILL_GROUPS = (
    ("technologies", "Technologies"),
    ("platforms", "Platforms & Tools"),
    ("soft", "Soft Skills"),
)

PAGE_TEMPLATE = Template('''"use client"

import { useState, useEffect } from "react"
import { $icons } from "lucide-react"
import { ImageCanvas } from "@/components/image-canvas"

$constants

export default function Home() {
  const [image, setImage] = useState<HTMLImageElement | null>(null)

  useEffect(() => {
    const img = new Image()
    img.crossOrigin = "anonymous"
    img.onload = () => {
      setImage(img)
    }
    img.src = "/$photo"
  }, [])

  return (
    <main className="min-h-screen bg-background text-foreground relative overflow-hidden">
      <div className="fixed inset-0 pointer-events-none opacity-10">
        <div className="absolute top-0 left-0 w-96 h-96 bg-primary rounded-full blur-3xl"></div>
        <div className="absolute bottom-0 right-0 w-96 h-96 bg-primary rounded-full blur-3xl"></div>
      </div>

      <div className="relative z-10 max-w-7xl mx-auto px-6 py-8 md:py-12">
        <header className="mb-16">
          <div className="grid grid-cols-1 lg:grid-cols-2 gap-8 lg:gap-12 items-center">
            <div className="order-2 lg:order-1 flex justify-center lg:justify-start">
              <div className="relative w-full max-w-lg aspect-4/3 rounded-2xl overflow-hidden border-4 border-primary shadow-2xl">
                {image ? (
                  <ImageCanvas
                    image={image}
                    halftoneSize={HALFTONE_SIZE}
                    contrast={CONTRAST}
                    accentColor={ACCENT_COLOR}
                    mouseRadius={MOUSE_RADIUS}
                    repulsionStrength={REPULSION_STRENGTH}
                    returnSpeed={RETURN_SPEED}
                    accentProbability={ACCENT_PROBABILITY}
                    sizeVariation={SIZE_VARIATION}
                  />
                ) : (
                  <div className="w-full h-full bg-card flex items-center justify-center">
                    <div className="text-muted-foreground">Loading...</div>
                  </div>
                )}
              </div>
            </div>

            <div className="order-1 lg:order-2">
              <h1 className="text-4xl md:text-5xl lg:text-6xl font-bold mb-4 text-foreground leading-tight">
                $first_name<br />$last_name
              </h1>
              <p className="text-xl md:text-2xl lg:text-3xl text-primary mb-8 font-medium">
                $title
              </p>
              <div className="flex flex-wrap gap-4 text-sm md:text-base text-muted-foreground">
$links
              </div>
            </div>
          </div>
        </header>

        <div className="max-w-5xl mx-auto space-y-16">
          <section>
            <h2 className="text-3xl font-bold mb-6 text-primary border-b-2 border-primary pb-3 inline-block">
              SUMMARY
            </h2>
            <p className="text-foreground leading-relaxed text-lg whitespace-pre-line">
              $summary
            </p>
          </section>

          <section>
            <h2 className="text-3xl font-bold mb-8 text-primary border-b-2 border-primary pb-3 inline-block">
              PROFESSIONAL EXPERIENCE
            </h2>

            <div className="space-y-10">
$experience
            </div>
          </section>

          <section>
            <h2 className="text-3xl font-bold mb-8 text-primary border-b-2 border-primary pb-3 inline-block">
              PROJECTS
            </h2>

            <div className="grid grid-cols-1 md:grid-cols-2 gap-6">
$projects
            </div>
          </section>

$volunteering

          <section>
            <h2 className="text-3xl font-bold mb-8 text-primary border-b-2 border-primary pb-3 inline-block">
              SKILLS
            </h2>

            <div className="grid grid-cols-1 md:grid-cols-3 gap-6">
$skills
            </div>
          </section>

          <section>
            <h2 className="text-3xl font-bold mb-8 text-primary border-b-2 border-primary pb-3 inline-block">
              EDUCATION
            </h2>

            <div className="space-y-6">
$education
            </div>
          </section>

          <section className="pb-12">
            <h2 className="text-3xl font-bold mb-6 text-primary border-b-2 border-primary pb-3 inline-block">
              LANGUAGES
            </h2>

            <div className="bg-card p-6 rounded-xl border-2 border-border shadow-lg">
              <ul className="space-y-3 text-foreground list-none">
$languages
              </ul>
            </div>
          </section>
        </div>
      </div>
    </main>
  )
}
''')


def contact_links(personal: dict[str, Any]) -> list[dict[str, str]]:
    """Header links in display order; absent services are skipped."""
    links = personal.get("links") or {}
    out = []
    if links.get("github"):
        gh = links["github"]
        out.append({"icon": "Github", "label": gh.get("username", ""), "href": gh.get("url", "")})
    if links.get("linkedin"):
        out.append({"icon": "Linkedin", "label": "LinkedIn", "href": links["linkedin"].get("url", "")})
    if links.get("email"):
        out.append({"icon": "Mail", "label": "Email", "href": f"mailto:{links['email'].get('address', '')}"})
    if links.get("telegram"):
        tg = links["telegram"]
        out.append({"icon": "MessageCircle", "label": tg.get("username", ""), "href": tg.get("url", "")})
    return out


def canvas_constants(canvas: dict[str, Any] | None) -> str:
    canvas = canvas or {}
    defaults = DotFieldConfig()
    lines = []
    for key, const, attr in CANVAS_CONSTANTS:
        value = canvas.get(key)
        if value is None:
            value = getattr(defaults, attr)
        if isinstance(value, str):
            lines.append(f'const {const} = "{value}"')
        else:
            lines.append(f"const {const} = {js_number(value)}")
    return "\n".join(lines)


def _render_link(link: dict[str, str]) -> str:
    attrs = ""
    if link["href"].startswith("http"):
        attrs = 'target="_blank"\n                  rel="noopener noreferrer"'
    return (
        "                <a\n"
        f'                  href="{escape_html(link["href"])}"\n'
        f"                  {attrs}\n"
        '                  className="flex items-center gap-2 hover:text-primary transition-colors px-4 py-2 rounded-lg hover:bg-card"\n'
        "                >\n"
        f'                  <{link["icon"]} className="w-5 h-5" />\n'
        f'                  {escape_html(link["label"])}\n'
        "                </a>"
    )


def _render_experience(exp: dict[str, Any]) -> str:
    bullets = "\n".join(
        '                  <li className="flex items-start gap-3">\n'
        '                    <span className="text-primary mt-2">▸</span>\n'
        f"                    <span>{escape_html(resp)}</span>\n"
        "                  </li>"
        for resp in exp.get("responsibilities") or []
    )
    return (
        '              <div className="relative pl-8 border-l-4 border-primary">\n'
        '                <div className="absolute -left-2 top-0 w-4 h-4 bg-primary rounded-full"></div>\n'
        '                <div className="flex flex-col md:flex-row md:items-center md:justify-between mb-3">\n'
        '                  <h3 className="text-2xl font-semibold text-foreground">\n'
        f"                    {escape_html(exp.get('title'))}\n"
        "                  </h3>\n"
        f'                  <span className="text-primary font-medium text-lg">{escape_html(exp.get("period"))}</span>\n'
        "                </div>\n"
        f'                <p className="text-primary mb-5 font-medium text-lg">{escape_html(exp.get("company"))}</p>\n'
        '                <ul className="space-y-2.5 text-foreground list-none">\n'
        f"{bullets}\n"
        "                </ul>\n"
        "              </div>"
    )


def _render_project(proj: dict[str, Any]) -> str:
    span_class = "md:col-span-2" if proj.get("span") == 2 else ""

    description = ""
    if proj.get("description"):
        description = (
            f'                <p className="text-foreground mb-3 text-sm">'
            f'{escape_html(str(proj["description"]).strip())}</p>'
        )

    points = ""
    if proj.get("points"):
        items = "\n".join(
            '                  <li className="flex items-start gap-2">\n'
            '                    <span className="text-primary mt-1.5 text-xs">▸</span>\n'
            f'                    <span className="text-sm">{escape_html(point)}</span>\n'
            "                  </li>"
            for point in proj["points"]
        )
        points = (
            '                <ul className="space-y-2 text-foreground list-none">\n'
            f"{items}\n"
            "                </ul>"
        )

    return (
        f'              <div className="bg-card p-6 rounded-xl border-2 border-border hover:border-primary transition-colors shadow-lg {span_class}">\n'
        '                <div className="flex flex-col mb-4">\n'
        '                  <h3 className="text-xl font-semibold text-foreground mb-2">\n'
        f"                    {escape_html(proj.get('title'))}\n"
        "                  </h3>\n"
        f'                  <span className="text-primary font-medium">{escape_html(proj.get("period"))}</span>\n'
        "                </div>\n"
        f"{description}\n"
        f"{points}\n"
        "              </div>"
    )


def _render_volunteering(entries: list[dict[str, Any]] | None) -> str:
    if not entries:
        return ""

    cards = []
    for vol in entries:
        organization = ""
        if vol.get("organization"):
            organization = f'<p className="text-primary mb-3 font-medium text-lg">{escape_html(vol["organization"])}</p>'
        link = ""
        if vol.get("link"):
            link = (
                "                <br />\n"
                f'                <a href="{escape_html(vol["link"].get("url"))}" target="_blank" rel="noopener noreferrer" '
                f'className="text-primary font-bold">{escape_html(vol["link"].get("text"))}</a>'
            )
        cards.append(
            '              <div className="bg-card p-6 rounded-xl border-2 border-border shadow-lg">\n'
            '                <div className="flex flex-col md:flex-row md:items-center md:justify-between mb-3">\n'
            '                  <h3 className="text-xl font-semibold text-foreground">\n'
            f"                    {escape_html(vol.get('title'))}\n"
            "                  </h3>\n"
            f'                  <span className="text-primary font-medium">{escape_html(vol.get("period"))}</span>\n'
            "                </div>\n"
            f"                {organization}\n"
            '                <p className="text-foreground">\n'
            f"                  {escape_html(vol.get('description'))}\n"
            "                </p>\n"
            f"{link}\n"
            "              </div>"
        )

    return (
        "<section>\n"
        '            <h2 className="text-3xl font-bold mb-6 text-primary border-b-2 border-primary pb-3 inline-block">\n'
        "              VOLUNTEERING\n"
        "            </h2>\n"
        "\n"
        '            <div className="space-y-6">\n'
        + "\n\n".join(cards)
        + "\n            </div>\n"
        "          </section>"
    )


def _render_skill_group(title: str, items) -> str:
    return (
        '              <div className="bg-card p-6 rounded-xl border-2 border-border shadow-lg">\n'
        f'                <h3 className="font-semibold text-primary mb-4 text-lg">{title}</h3>\n'
        '                <div className="flex flex-wrap gap-2">\n'
        f"                  {{[{js_string_array(items)}].map((skill) => (\n"
        "                    <span\n"
        "                      key={skill}\n"
        '                      className="px-3 py-1.5 bg-primary/20 text-primary rounded-lg text-sm font-medium"\n'
        "                    >\n"
        "                      {skill}\n"
        "                    </span>\n"
        "                  ))}\n"
        "                </div>\n"
        "              </div>"
    )


def _render_education(edu: dict[str, Any]) -> str:
    return (
        '              <div className="bg-card p-6 rounded-xl border-2 border-border shadow-lg">\n'
        '                <div className="flex flex-col md:flex-row md:items-center md:justify-between mb-2">\n'
        '                  <h3 className="text-xl font-semibold text-foreground">\n'
        f"                    {escape_html(edu.get('degree'))}\n"
        "                  </h3>\n"
        f'                  <span className="text-primary font-medium">{escape_html(edu.get("period"))}</span>\n'
        "                </div>\n"
        f'                <p className="text-muted-foreground">{escape_html(edu.get("institution"))}</p>\n'
        "              </div>"
    )


def _render_language(lang) -> str:
    return (
        '                <li className="flex items-center gap-3">\n'
        '                  <span className="text-primary text-xl">▸</span>\n'
        f'                  <span className="text-lg">{escape_html(lang)}</span>\n'
        "                </li>"
    )


def generate_page(resume: dict[str, Any]) -> str:
    """Render the page component source for ``resume``."""
    personal = resume.get("personal") or {}
    name_parts = str(personal.get("name", "")).split(" ")
    first_name = name_parts[0] if name_parts else ""
    last_name = " ".join(name_parts[1:])

    links = contact_links(personal)
    skills = resume.get("skills") or {}

    return PAGE_TEMPLATE.substitute(
        icons=", ".join(link["icon"] for link in links),
        constants=canvas_constants(resume.get("canvas")),
        photo=personal.get("photo", ""),
        first_name=escape_html(first_name).upper(),
        last_name=escape_html(last_name).upper(),
        title=escape_html(personal.get("title")),
        links="\n".join(_render_link(link) for link in links),
        summary=escape_html(format_multiline(resume.get("summary"))),
        experience="\n\n".join(_render_experience(exp) for exp in resume.get("experience") or []),
        projects="\n\n".join(_render_project(proj) for proj in resume.get("projects") or []),
        volunteering=_render_volunteering(resume.get("volunteering")),
        skills="\n\n".join(_render_skill_group(title, skills.get(key)) for key, title in SKILL_GROUPS),
        education="\n\n".join(_render_education(edu) for edu in resume.get("education") or []),
        languages="\n".join(_render_language(lang) for lang in resume.get("languages") or []),
    )
