"""
Tests for admin.media_options

Test Coverage:
- strip_image_sizes_section(): Section removal up to the next <h2>
- filter_admin_screen(): Screen gating
"""
from image_formats.admin import filter_admin_screen, strip_image_sizes_section


MEDIA_PAGE = (
    '<div class="wrap">\n'
    '<h2 class="title">Image sizes</h2>\n'
    '<p>The sizes listed below determine the maximum dimensions.</p>\n'
    '<table class="form-table"><tr><th>Thumbnail size</th></tr></table>\n'
    '<h2 class="title">Uploading Files</h2>\n'
    '<table class="form-table"><tr><th>Organize</th></tr></table>\n'
    '</div>'
)

STRIPPED_PAGE = (
    '<div class="wrap">\n'
    '<h2 class="title">Uploading Files</h2>\n'
    '<table class="form-table"><tr><th>Organize</th></tr></table>\n'
    '</div>'
)


class TestStripImageSizesSection:
    """Tests for strip_image_sizes_section()."""

    def test_strip_removes_section_up_to_next_heading(self):
        assert strip_image_sizes_section(MEDIA_PAGE) == STRIPPED_PAGE

    def test_strip_when_other_heading_first_then_only_target_removed(self):
        # Arrange
        html = '<h2 class="title">General</h2><p>a</p>' + MEDIA_PAGE

        # Act
        result = strip_image_sizes_section(html)

        # Assert
        assert result == '<h2 class="title">General</h2><p>a</p>' + STRIPPED_PAGE

    def test_strip_when_no_following_heading_then_unchanged(self):
        html = '<h2 class="title">Image sizes</h2><p>last section</p>'
        assert strip_image_sizes_section(html) == html

    def test_strip_when_heading_has_no_attributes_then_unchanged(self):
        """Host headings always carry a class attribute."""
        html = "<h2>Image sizes</h2><p>x</p><h2>Next</h2>"
        assert strip_image_sizes_section(html) == html

    def test_strip_removes_first_match_only(self):
        html = (
            '<h2 class="t">Image sizes</h2>one'
            '<h2 class="t">Image sizes</h2>two'
            '<h2 class="t">End</h2>'
        )
        assert strip_image_sizes_section(html) == (
            '<h2 class="t">Image sizes</h2>two<h2 class="t">End</h2>'
        )

    def test_strip_with_translated_heading(self):
        html = '<h2 class="title">Bildstorlekar</h2><p>x</p><h2 class="title">Uppladdning</h2>'
        assert (
            strip_image_sizes_section(html, heading="Bildstorlekar")
            == '<h2 class="title">Uppladdning</h2>'
        )

    def test_strip_escapes_heading(self):
        """Regex characters in the heading are matched literally."""
        html = '<h2 class="t">Sizes (px)</h2>x<h2 class="t">Next</h2><h2 class="t">Sizes px</h2>y<h2 class="t">End</h2>'
        result = strip_image_sizes_section(html, heading="Sizes (px)")
        assert result == '<h2 class="t">Next</h2><h2 class="t">Sizes px</h2>y<h2 class="t">End</h2>'


class TestFilterAdminScreen:
    """Tests for filter_admin_screen()."""

    def test_filter_on_media_screen_strips(self):
        assert filter_admin_screen("options-media", MEDIA_PAGE) == STRIPPED_PAGE

    def test_filter_on_other_screen_unchanged(self):
        assert filter_admin_screen("options-general", MEDIA_PAGE) == MEDIA_PAGE

    def test_filter_without_screen_unchanged(self):
        assert filter_admin_screen(None, MEDIA_PAGE) == MEDIA_PAGE
