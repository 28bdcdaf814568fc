"""Tests for Org front matter helpers."""

import pytest
from datetime import datetime
from pathlib import Path

from orgsite_pkg.orgfile import (
    export_options_template,
    parse_export_options,
    get_title,
    parse_org_date,
    file_stem,
)


class TestExportOptions:
    """Test cases for export-option boilerplate and parsing."""

    def test_template_contains_standard_options(self):
        """The boilerplate carries every standard export option."""
        text = export_options_template('post1', author='Jane', email='jane@example.com',
                                       date=datetime(2013, 2, 17))

        assert text.startswith('#+TITLE:       post1\n')
        assert '#+AUTHOR:      Jane\n' in text
        assert '#+EMAIL:       jane@example.com\n' in text
        assert '#+DATE:        2013-02-17 Sun\n' in text
        assert '#+LANGUAGE:    en\n' in text
        assert '#+EXPORT_EXCLUDE_TAGS: noexport' in text
        assert text.count('#+OPTIONS:') == 2

    def test_template_round_trips_through_parser(self):
        """Parsing generated boilerplate recovers its fields."""
        options = parse_export_options(export_options_template('about', author='Jane'))

        assert options['title'] == 'about'
        assert options['author'] == 'Jane'
        assert options['description'] == ''

    def test_parse_first_occurrence_wins(self):
        """Repeated keys keep their first value."""
        options = parse_export_options('#+OPTIONS: H:3\n#+OPTIONS: toc:nil\n')

        assert options['options'] == 'H:3'

    def test_parse_keys_case_insensitive(self):
        """Lower-case option keys are recognised."""
        assert parse_export_options('#+title: Lower\n')['title'] == 'Lower'

    def test_parse_reads_past_content(self):
        """Keywords after body text are still read."""
        options = parse_export_options('#+TITLE: Top\n\n* Heading\n#+AUTHOR: Late\n')

        assert options == {'title': 'Top', 'author': 'Late'}

    def test_parse_skips_blocks(self):
        """Keyword-like lines inside #+BEGIN_.../#+END_... blocks are ignored."""
        text = ('#+begin_src org\n#+TITLE: Example in code\n#+end_src\n'
                '#+BEGIN_EXAMPLE\n#+AUTHOR: Nobody\n#+END_EXAMPLE\n'
                '#+TITLE: Real\n')

        options = parse_export_options(text)

        assert options == {'title': 'Real'}

    def test_parse_skips_comments(self):
        """Plain Org comments inside the front matter are ignored."""
        options = parse_export_options('# comment\n#+TITLE: Kept\n')

        assert options['title'] == 'Kept'


class TestGetTitle:
    """Test cases for title resolution."""

    def test_declared_title(self, temp_dir):
        """A declared #+TITLE is returned."""
        org_file = Path(temp_dir) / 'hello.org'
        org_file.write_text('#+TITLE: Hello World\n\nBody\n')

        assert get_title(str(org_file)) == 'Hello World'

    def test_title_after_property_drawer(self, temp_dir):
        """A leading :PROPERTIES: drawer does not hide the title."""
        org_file = Path(temp_dir) / 'note.org'
        org_file.write_text(':PROPERTIES:\n:ID: abc\n:END:\n#+TITLE: Real Title\n')

        assert get_title(str(org_file)) == 'Real Title'

    def test_title_after_text(self, temp_dir):
        """A title declared after body text is still found."""
        org_file = Path(temp_dir) / 'late.org'
        org_file.write_text('Intro line\n#+TITLE: Late Title\n')

        assert get_title(str(org_file)) == 'Late Title'

    def test_fallback_to_file_name(self, temp_dir):
        """Without a title the file name without extension is returned."""
        org_file = Path(temp_dir) / 'my-notes.org'
        org_file.write_text('* Just a heading\n')

        assert get_title(str(org_file)) == 'my-notes'

    def test_fallback_on_empty_title(self, temp_dir):
        """An empty #+TITLE also falls back to the file name."""
        org_file = Path(temp_dir) / 'empty.org'
        org_file.write_text('#+TITLE:\n')

        assert get_title(str(org_file)) == 'empty'

    def test_missing_file(self, temp_dir):
        """Reading a missing file propagates the file-system error."""
        with pytest.raises(FileNotFoundError):
            get_title(str(Path(temp_dir) / 'missing.org'))

    def test_file_stem(self):
        assert file_stem('/a/b/post1.org') == 'post1'


class TestParseOrgDate:
    """Test cases for Org date parsing."""

    @pytest.mark.parametrize('value, expected', [
        ('<2013-02-17 Sun>', datetime(2013, 2, 17)),
        ('[2013-02-17 Sun 10:30]', datetime(2013, 2, 17, 10, 30)),
        ('2013-02-17', datetime(2013, 2, 17)),
        ('2013-02-17 08:05', datetime(2013, 2, 17, 8, 5)),
    ])
    def test_formats(self, value, expected):
        assert parse_org_date(value) == expected

    def test_unparseable(self):
        assert parse_org_date('someday') is None
        assert parse_org_date('') is None
