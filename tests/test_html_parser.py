import pytest
from portfolio_server.services.html_parser import HTMLParser, clean_text, decode_html, resolve_url


class TestHTMLParser:
    """Unit tests for HTMLParser"""

    def test_get_title_from_og_title(self):
        """Test extracting title from og:title meta tag."""
        # Arrange
        html = """
        <html>
        <head>
            <meta property="og:title" content="Open Graph Title">
            <meta name="twitter:title" content="Twitter Title">
            <title>Regular Title</title>
        </head>
        <body></body>
        </html>
        """
        parser = HTMLParser(html, "https://example.com")

        # Act
        result = parser.get_title()

        # Assert
        assert result == "Open Graph Title"

    def test_get_title_from_twitter_title(self):
        """twitter:title is used when og:title is missing."""
        html = """
        <html><head>
            <meta name="twitter:title" content="Twitter Title">
            <title>Regular Title</title>
        </head></html>
        """
        parser = HTMLParser(html, "https://example.com")

        assert parser.get_title() == "Twitter Title"

    def test_get_title_from_regular_title(self):
        """Test extracting title from regular title tag when og:title not present."""
        # Arrange
        html = """
        <html>
        <head>
            <title>Regular Title</title>
        </head>
        <body></body>
        </html>
        """
        parser = HTMLParser(html, "https://example.com")

        # Act
        result = parser.get_title()

        # Assert
        assert result == "Regular Title"

    def test_meta_lookup_ignores_attribute_order_and_quotes(self):
        """content before property, single quotes and odd casing still match."""
        html = """
        <html><head>
            <meta content='Reversed Title' property='OG:Title'>
            <meta content="Reversed Description" name="description">
        </head></html>
        """
        parser = HTMLParser(html, "https://example.com")

        assert parser.get_title() == "Reversed Title"
        assert parser.get_description() == "Reversed Description"

    def test_get_description(self):
        """Test extracting description from meta tags."""
        # Arrange
        html = """
        <html>
        <head>
            <meta property="og:description" content="Open Graph Description">
            <meta name="description" content="Regular Description">
        </head>
        <body></body>
        </html>
        """
        parser = HTMLParser(html, "https://example.com")

        # Act & Assert
        # Should prefer og:description
        result = parser.get_description()
        assert result == "Open Graph Description"

    def test_empty_meta_content_is_skipped(self):
        """An empty og:description does not hide the generic description."""
        html = """
        <html><head>
            <meta property="og:description" content="   ">
            <meta name="description" content="Regular Description">
        </head></html>
        """
        parser = HTMLParser(html, "https://example.com")

        assert parser.get_description() == "Regular Description"

    def test_get_image_from_og_image(self):
        """Test extracting image from og:image meta tag."""
        # Arrange
        html = """
        <html>
        <head>
            <meta property="og:image" content="https://example.com/image.jpg">
            <meta name="twitter:image" content="https://example.com/twitter.jpg">
        </head>
        <body></body>
        </html>
        """
        parser = HTMLParser(html, "https://example.com")

        # Act
        result = parser.get_image()

        # Assert
        assert result == "https://example.com/image.jpg"

    @pytest.mark.parametrize("head,expected", [
        ('<meta property="og:image:secure_url" content="https://cdn.test/secure.jpg">', "https://cdn.test/secure.jpg"),
        ('<meta name="twitter:image" content="https://cdn.test/tw.jpg">', "https://cdn.test/tw.jpg"),
        ('<meta name="twitter:image:src" content="https://cdn.test/tw-src.jpg">', "https://cdn.test/tw-src.jpg"),
        ('<meta itemprop="image" content="https://cdn.test/itemprop.jpg">', "https://cdn.test/itemprop.jpg"),
        ('<link rel="image_src" href="https://cdn.test/link.jpg">', "https://cdn.test/link.jpg"),
    ])
    def test_get_image_lookup_order(self, head, expected):
        """Each image source is found when the ones before it are missing."""
        html = f"<html><head>{head}</head><body><img src='/body.jpg'></body></html>"
        parser = HTMLParser(html, "https://example.com")

        assert parser.get_image() == expected

    def test_get_image_from_img_tag_fallback(self):
        """Test extracting image from img tag when og:image not present."""
        # Arrange
        html = """
        <html>
        <head></head>
        <body>
            <img src="/path/to/image.jpg" alt="An image">
        </body>
        </html>
        """
        parser = HTMLParser(html, "https://example.com")

        # Act
        result = parser.get_absolute_image()

        # Assert
        # Should resolve relative URL to absolute
        assert result == "https://example.com/path/to/image.jpg"

    def test_get_image_prefers_lazy_load_attributes(self):
        """data-src beats a placeholder src on an earlier image."""
        html = """
        <html><body>
            <img src="/placeholder.gif">
            <img class="lazy" data-src="/real-photo.jpg">
        </body></html>
        """
        parser = HTMLParser(html, "https://example.com/story")

        assert parser.get_image() == "/real-photo.jpg"
        assert parser.get_absolute_image() == "https://example.com/real-photo.jpg"

    def test_get_absolute_image_protocol_relative(self):
        html = '<html><head><meta property="og:image" content="//cdn.example.com/a.png"></head></html>'
        parser = HTMLParser(html, "https://example.com/page")

        assert parser.get_absolute_image() == "https://cdn.example.com/a.png"

    def test_get_meta_content_existing(self):
        """Test extracting content from existing meta tag."""
        # Arrange
        html = """
        <html>
        <head>
            <meta property="og:site_name" content="Example Site">
        </head>
        <body></body>
        </html>
        """
        parser = HTMLParser(html, "https://example.com")

        # Act
        result = parser.get_meta_content("og:site_name")

        # Assert
        assert result == "Example Site"

    def test_get_meta_content_nonexistent(self):
        """Test extracting content from non-existent meta tag returns None."""
        parser = HTMLParser("<html><head></head><body></body></html>", "https://example.com")

        assert parser.get_meta_content("nonexistent") is None

    def test_article_fields(self):
        """Author and times use the article: fallbacks."""
        # Arrange
        html = """
        <html>
        <head>
            <meta property="og:type" content="article">
            <meta property="article:author" content="Maria Clara">
            <meta property="article:published" content="2024-05-01">
            <meta property="article:modified_time" content="2024-05-02T10:00:00Z">
        </head>
        <body></body>
        </html>
        """
        parser = HTMLParser(html, "https://example.com")

        # Assert
        assert parser.get_type() == "article"
        assert parser.get_author() == "Maria Clara"
        assert parser.get_published_time() == "2024-05-01"
        assert parser.get_modified_time() == "2024-05-02T10:00:00Z"

    def test_get_tags_from_article_tags(self):
        html = """
        <html><head>
            <meta property="article:tag" content="Amazônia">
            <meta property="article:tag" content="Meio ambiente">
            <meta property="article:tag" content="Amazônia">
            <meta name="keywords" content="ignored, keywords">
        </head></html>
        """
        parser = HTMLParser(html, "https://example.com")

        assert parser.get_tags() == ["Amazônia", "Meio ambiente"]

    def test_get_tags_from_keywords(self):
        html = '<html><head><meta name="keywords" content="clima, , Amapá ,rios"></head></html>'
        parser = HTMLParser(html, "https://example.com")

        assert parser.get_tags() == ["clima", "Amapá", "rios"]

    def test_malformed_html_does_not_raise(self):
        """Unclosed tags and junk still yield what can be found."""
        html = '<html><head><title>Broken <meta property="og:description" content="Still here"'
        parser = HTMLParser(html, "https://example.com")

        # Whatever lxml recovers, probing must not blow up
        parser.get_title()
        parser.get_description()
        assert parser.get_image() is None


class TestTextHelpers:
    """Unit tests for clean_text and resolve_url"""

    def test_clean_text_collapses_whitespace(self):
        assert clean_text("  Hello\n\n   world\t! ") == "Hello world !"

    def test_clean_text_strips_markup(self):
        assert clean_text("<b>Bold</b> and <i>italic</i>") == "Bold and italic"

    def test_clean_text_empty(self):
        assert clean_text(None) == ""
        assert clean_text("") == ""

    @pytest.mark.parametrize("value,expected", [
        ("/img/a.png", "https://site.test/img/a.png"),
        ("img/a.png", "https://site.test/dir/img/a.png"),
        ("//cdn.test/a.png", "https://cdn.test/a.png"),
        ("http://other.test/a.png", "http://other.test/a.png"),
        ("data:image/png;base64,AAAA", ""),
        ("javascript:void(0)", ""),
        ("http://[broken/a.png", ""),
        ("", ""),
        (None, ""),
    ])
    def test_resolve_url(self, value, expected):
        assert resolve_url("https://site.test/dir/page", value) == expected


class TestDecodeHtml:
    """Unit tests for decode_html and byte input"""

    LATIN1_PAGE = (
        '<html><head><meta charset="iso-8859-1">'
        "<title>Garimpo no Amapá</title></head></html>"
    ).encode("iso-8859-1")

    def test_meta_charset_is_honoured(self):
        """A Latin-1 page without a header charset is read by its <meta charset>."""
        # Act
        parser = HTMLParser(self.LATIN1_PAGE, "https://example.com.br")

        # Assert
        assert parser.get_title() == "Garimpo no Amapá"

    def test_http_equiv_content_type(self):
        body = (
            '<html><head><meta http-equiv="Content-Type" content="text/html; charset=windows-1252">'
            "<title>Ação</title></head></html>"
        ).encode("cp1252")

        assert HTMLParser(body, "https://example.com.br").get_title() == "Ação"

    def test_header_charset_wins(self):
        body = "<html><head><title>Amapá</title></head></html>".encode("iso-8859-1")

        assert decode_html(body, "iso-8859-1") == "<html><head><title>Amapá</title></head></html>"

    def test_undeclared_utf8(self):
        body = "<html><head><title>Amapá e Pará</title></head></html>".encode("utf-8")

        assert HTMLParser(body, "https://example.com").get_title() == "Amapá e Pará"
