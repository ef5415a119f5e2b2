"""Tests for the page generator."""

from cv2web.site.page import canvas_constants, contact_links, generate_page


class TestContactLinks:
    def test_order_and_hrefs(self, resume):
        links = contact_links(resume["personal"])
        assert [link["icon"] for link in links] == ["Github", "Linkedin", "Mail", "MessageCircle"]
        assert links[0]["label"] == "ada"
        assert links[2]["href"] == "mailto:ada@example.com"
        assert links[3]["label"] == "@ada"

    def test_absent_services_skipped(self):
        links = contact_links({"links": {"email": {"address": "a@b.c"}}})
        assert [link["icon"] for link in links] == ["Mail"]
        assert contact_links({}) == []


class TestCanvasConstants:
    def test_values_and_defaults(self, resume):
        text = canvas_constants(resume["canvas"])
        assert "const HALFTONE_SIZE = 4" in text
        assert "const CONTRAST = 1.5" in text
        assert 'const ACCENT_COLOR = "#ff0000"' in text
        assert "const MOUSE_RADIUS = 100" in text
        assert "const RETURN_SPEED = 0.6" in text
        assert len(text.splitlines()) == 8

    def test_empty_canvas(self):
        text = canvas_constants(None)
        assert "const HALFTONE_SIZE = 0.0001" in text
        assert 'const ACCENT_COLOR = "#CECFC7"' in text


class TestGeneratePage:
    def test_header(self, resume):
        page = generate_page(resume)
        assert page.startswith('"use client"')
        assert "ADA<br />LOVELACE" in page
        assert "Analyst &lt;Engines&gt;" in page
        assert 'import { Github, Linkedin, Mail, MessageCircle } from "lucide-react"' in page
        assert 'img.src = "/photo.png"' in page

    def test_external_links_open_in_new_tab(self, resume):
        page = generate_page(resume)
        assert 'href="https://github.com/ada"\n                  target="_blank"' in page
        assert 'href="mailto:ada@example.com"\n                  \n' in page

    def test_content_is_escaped(self, resume):
        page = generate_page(resume)
        assert "Wrote the first program &amp; more." in page
        assert "Babbage &amp; Co" in page
        assert "Babbage & Co" not in page

    def test_sections(self, resume):
        page = generate_page(resume)
        assert "Computed Bernoulli numbers" in page
        assert '"Analytical Engine"' in page
        assert "Platforms &amp; Tools" not in page
        assert "Platforms & Tools" in page
        assert "Private tutoring" in page
        assert '<span className="text-lg">French</span>' in page

    def test_project_cards(self, resume):
        page = generate_page(resume)
        assert page.count("md:col-span-2") == 1
        assert ">Note G</p>" in page
        assert '<span className="text-sm">Loops</span>' in page

    def test_volunteering_only_when_present(self, resume):
        assert "VOLUNTEERING" not in generate_page(resume)

        resume["volunteering"] = [{
            "title": "Mentor",
            "organization": "Club",
            "period": "2020",
            "description": "Teaching",
            "link": {"url": "https://club.example", "text": "Club site"},
        }]
        page = generate_page(resume)
        assert "VOLUNTEERING" in page
        assert 'href="https://club.example"' in page
        assert ">Club site</a>" in page

    def test_minimal_resume(self):
        page = generate_page({"personal": {"name": "Plato"}})
        assert "PLATO<br />" in page
        assert "const HALFTONE_SIZE = 0.0001" in page
