"""Generates ``app/layout.tsx``: root layout, fonts and page metadata."""

import re
from string import Template
from typing import Any

from cv2web.site.markup import escape_html

DEFAULT_SANS = "Geist"
DEFAULT_MONO = "Geist Mono"

LAYOUT_TEMPLATE = Template('''import type React from "react"
import type { Metadata } from "next"
import { $sans_import, $mono_import } from "next/font/google"
import "./globals.css"

const _sans = $sans_import({ subsets: ["latin"] })
const _mono = $mono_import({ subsets: ["latin"] })

export const metadata: Metadata = {
  title: "$title",
  description: "Resume Website",
}

export default function RootLayout({
  children,
}: Readonly<{
  children: React.ReactNode
}>) {
  return (
    <html lang="en">
      <body className={`font-sans antialiased`}>
        {children}
      </body>
    </html>
  )
}
''')


def font_import_name(font: str) -> str:
    """Google font loader name: whitespace runs become underscores."""
    return re.sub(r"\s+", "_", font)


def generate_layout(resume: dict[str, Any]) -> str:
    personal = resume.get("personal") or {}
    fonts = resume.get("fonts") or {}
    return LAYOUT_TEMPLATE.substitute(
        sans_import=font_import_name(fonts.get("sans") or DEFAULT_SANS),
        mono_import=font_import_name(fonts.get("mono") or DEFAULT_MONO),
        title=escape_html(personal.get("name")),
    )
