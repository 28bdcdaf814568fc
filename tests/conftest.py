"""Test configuration and fixtures for org-site tests."""

import pytest
import tempfile
import shutil
import os
from pathlib import Path
import sys
import logging
import yaml

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from orgsite_pkg.settings import SiteConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture(autouse=True)
def no_editor(monkeypatch):
    """Make sure no test launches a real editor."""
    monkeypatch.delenv('VISUAL', raising=False)
    monkeypatch.delenv('EDITOR', raising=False)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers added by the CLI so they do not outlive captured streams."""
    yield
    logger = logging.getLogger('OrgSite')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def mock_project_dir(temp_dir):
    """Create a project directory with a configuration file and a post."""
    project_dir = Path(temp_dir) / 'site'
    (project_dir / 'post').mkdir(parents=True)
    (project_dir / 'wiki').mkdir()

    config_file = project_dir / 'orgsite.yml'
    config_file.write_text(yaml.dump({
        'site_title': 'Example',
        'site_url': 'https://example.com/',
        'author_name': 'Jane Smith',
        'author_email': 'jane@example.com',
        'disqus_shortname': 'example-blog',
        'enable_meta_info': True,
        'enable_comment': True,
    }))

    post = project_dir / 'post' / 'hello.org'
    post.write_text("""#+TITLE:       Hello World
#+AUTHOR:      John Doe
#+DATE:        <2013-02-17 Sun>
#+KEYWORDS:    emacs, org

* Introduction
Some text.
""")

    return str(project_dir)


@pytest.fixture
def mock_theme_dir(temp_dir):
    """Create a load directory holding a minimal 'plain' theme."""
    theme_dir = Path(temp_dir) / 'themes' / 'template' / 'plain'
    theme_dir.mkdir(parents=True)

    (theme_dir / 'preamble.html').write_text('<h1>{{site-title}}</h1><a href="{{nav-post}}">posts</a>')
    (theme_dir / 'footer.html').write_text('<p>{{author-name}} {{author-email}}</p>')
    (theme_dir / 'comment.html').write_text('<div data-id="{{disqus-identifier}}">{{disqus-shortname}}</div>')
    (theme_dir / 'meta-info.html').write_text(
        '<span>{{post-date}}</span>{{#tags}}<i>{{name}}</i>{{/tags}}<b>{{author-name}}</b>'
    )
    (theme_dir / 'postamble.html').write_text('{{{meta-info}}}|{{{comment}}}|{{{footer}}}')

    return str(Path(temp_dir) / 'themes')


@pytest.fixture
def site_config(mock_theme_dir):
    """A SiteConfig using the 'plain' test theme."""
    return SiteConfig(
        theme='plain',
        site_title='Example',
        site_url='https://example.com',
        author_name='Jane Smith',
        author_email='jane@example.com',
        disqus_shortname='example-blog',
        load_directory=mock_theme_dir,
    )
