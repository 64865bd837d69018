"""Test removing unsafe content from svg markup.

:author: Shay Hill
:created: 2025-10-20
"""

from xml.etree.ElementTree import ParseError

import defusedxml
import pytest
from conftest import TEST_RESOURCES
from lxml import etree

from svg_fluent.nsmap import SVG_NAMESPACE
from svg_fluent.sanitizer import Sanitizer, sanitize

_XLINK_HREF = "{http://www.w3.org/1999/xlink}href"


def _read(name: str) -> str:
    return (TEST_RESOURCES / name).read_text(encoding="utf-8")


def _local_names(markup: str) -> list[str]:
    root = etree.fromstring(markup)
    return [etree.QName(x).localname for x in root.iter() if isinstance(x.tag, str)]


def _first(markup: str, localname: str):
    root = etree.fromstring(markup)
    for elem in root.iter():
        if isinstance(elem.tag, str) and etree.QName(elem).localname == localname:
            return elem
    msg = f"no {localname} element"
    raise AssertionError(msg)


class TestSafeMarkup:
    def test_unchanged(self):
        """Return safe markup as serialized by lxml."""
        markup = '<svg viewBox="0 0 10 10"><circle r="1"/></svg>'
        assert sanitize(markup) == markup

    def test_blank(self):
        """Return an empty string for blank markup."""
        assert sanitize("  \n ") == ""

    def test_doctype_and_comments(self):
        """Drop the xml declaration, the doctype, and comments."""
        cleaned = sanitize(_read("doctype.svg"))
        assert cleaned.startswith("<svg")
        assert "DOCTYPE" not in cleaned
        assert "<!--" not in cleaned
        assert _local_names(cleaned) == ["svg", "rect"]


class TestUnsafeMarkup:
    @pytest.fixture
    def cleaned(self) -> str:
        return Sanitizer().sanitize(_read("unsafe.svg"))

    def test_elements_removed(self, cleaned: str):
        """Remove script, style imports, foreignObject, and href animation."""
        names = _local_names(cleaned)
        for name in ("script", "style", "foreignObject", "set", "div"):
            assert name not in names
        assert names.count("use") == 2

    def test_event_handlers_removed(self, cleaned: str):
        """Remove on* attributes."""
        assert "onload" not in _first(cleaned, "svg").attrib
        assert "onclick" not in _first(cleaned, "circle").attrib
        assert "alert" not in cleaned

    def test_script_href_removed(self, cleaned: str):
        """Remove a javascript: href but keep the element."""
        assert "href" not in _first(cleaned, "a").attrib
        assert _first(cleaned, "circle").get("id") == "a"

    def test_local_href_kept(self, cleaned: str):
        """Keep local fragment references."""
        assert 'href="#a"' in cleaned

    def test_remote_href_removed(self, cleaned: str):
        """Remove remote references by default."""
        assert "example.com" not in cleaned

    def test_data_uri_removed(self, cleaned: str):
        """Remove data URIs that are not images."""
        assert "href" not in _first(cleaned, "image").attrib

    def test_remote_url_removed(self, cleaned: str):
        """Remove remote url() values and keep local ones."""
        rect = _first(cleaned, "rect")
        assert rect.get("fill") is None
        assert rect.get("stroke") == "url(#grad)"


class TestKeepRemoteReferences:
    def test_remote_kept(self):
        """Keep remote references when asked."""
        sanitizer = Sanitizer(remove_remote_references=False)
        cleaned = sanitizer.sanitize(_read("unsafe.svg"))
        assert "https://example.com/sprite.svg#b" in cleaned
        rect = _first(cleaned, "rect")
        assert rect.get("fill") == "url(https://example.com/paint.svg#p)"

    def test_script_still_removed(self):
        """Remove scripts and handlers either way."""
        sanitizer = Sanitizer(remove_remote_references=False)
        cleaned = sanitizer.sanitize(_read("unsafe.svg"))
        assert "javascript" not in cleaned
        assert "data:text/html" not in cleaned

    def test_data_image_kept(self):
        """Keep embedded images."""
        markup = '<svg><image href="data:image/png;base64,AAAA"/></svg>'
        assert sanitize(markup) == markup


class TestCaseVariants:
    def test_uppercase_script(self):
        """Remove script elements in any case."""
        markup = f'<svg xmlns="{SVG_NAMESPACE}"><SCRIPT>alert(1)</SCRIPT></svg>'
        assert sanitize(markup) == f'<svg xmlns="{SVG_NAMESPACE}"/>'

    def test_mixed_case_elements(self):
        """Remove foreignObject and href animation in any case."""
        markup = (
            "<svg><FOREIGNOBJECT><div>x</div></FOREIGNOBJECT>"
            + '<Set attributeName="HREF" to="#b"/><rect/></svg>'
        )
        assert sanitize(markup) == "<svg><rect/></svg>"

    def test_uppercase_root(self):
        """Reject an unsafe root element in any case."""
        assert sanitize("<Script>alert(1)</Script>") == ""

    def test_uppercase_handler(self):
        """Remove event handlers in any case."""
        assert sanitize('<svg ONLOAD="alert(1)"/>') == "<svg/>"


class TestUrlNoise:
    @pytest.fixture
    def sanitizer(self) -> Sanitizer:
        return Sanitizer(remove_remote_references=False)

    def test_tab_in_scheme(self, sanitizer: Sanitizer):
        """Remove a script href with a tab inside the scheme."""
        markup = '<svg><a href="java&#9;script:alert(1)"><rect/></a></svg>'
        assert sanitizer.sanitize(markup) == "<svg><a><rect/></a></svg>"

    def test_newline_and_space(self, sanitizer: Sanitizer):
        """Remove a script href with newlines and leading spaces."""
        markup = '<svg><a href=" &#10;java&#13;script:alert(1)"><rect/></a></svg>'
        assert "alert" not in sanitizer.sanitize(markup)

    def test_animation_values_list(self, sanitizer: Sanitizer):
        """Remove animation with a script scheme anywhere in its values."""
        markup = '<svg><set attributeName="fill" values="red; java&#9;script:x"/></svg>'
        assert sanitizer.sanitize(markup) == "<svg/>"

    def test_remote_href_kept(self, sanitizer: Sanitizer):
        """Keep remote hrefs with whitespace when asked."""
        markup = '<svg><a href=" https://example.com/"><rect/></a></svg>'
        assert sanitizer.sanitize(markup) == markup


class TestStyleElement:
    def test_remote_url_removed(self):
        """Remove a style element with a remote url()."""
        markup = (
            "<svg><style>rect{fill:url(https://evil.example/x.svg#p)}</style>"
            + "<rect/></svg>"
        )
        assert sanitize(markup) == "<svg><rect/></svg>"

    def test_local_url_kept(self):
        """Keep a style element with local references."""
        markup = "<svg><style>rect{fill:url(#grad)}</style><rect/></svg>"
        assert sanitize(markup) == markup

    def test_remote_url_kept(self):
        """Keep remote url() in style when asked."""
        markup = "<svg><style>rect{fill:url(https://example.com/x.svg#p)}</style></svg>"
        sanitizer = Sanitizer(remove_remote_references=False)
        assert sanitizer.sanitize(markup) == markup

    def test_script_in_style(self):
        """Remove a style element with an obfuscated script scheme."""
        markup = "<svg><style>a{background:url(java\tscript:x)}</style></svg>"
        sanitizer = Sanitizer(remove_remote_references=False)
        assert sanitizer.sanitize(markup) == "<svg/>"


class TestRejected:
    def test_unsafe_root(self):
        """Return an empty string if the root element is unsafe."""
        assert sanitize(_read("script_root.svg")) == ""

    def test_entities(self):
        """Raise on entity declarations."""
        with pytest.raises(defusedxml.EntitiesForbidden):
            _ = sanitize(_read("entities.svg"))

    def test_malformed(self):
        """Raise on markup that is not well-formed."""
        with pytest.raises(ParseError):
            _ = sanitize(_read("malformed.svg"))

    def test_unsafe_style_attribute(self):
        """Remove style attributes with script."""
        markup = '<svg><rect style="background: url(javascript:alert(1))"/></svg>'
        assert sanitize(markup) == "<svg><rect/></svg>"

    def test_tail_kept(self):
        """Keep the text after a removed element."""
        markup = "<text>a<script>alert(1)</script>b</text>"
        assert sanitize(markup) == "<text>ab</text>"
