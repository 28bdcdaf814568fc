import os
import logging
from datetime import datetime
from typing import Any, Dict, Optional

import chevron

from .orgfile import read_export_options, parse_org_date
from .settings import SiteConfig

# Installation root; themes live under <LOAD_DIRECTORY>/template/<theme>/
LOAD_DIRECTORY = os.path.dirname(os.path.abspath(__file__))
TEMPLATE_ROOT = 'template'


def setup_logging(log_dir: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """Set up logging configuration."""
    logger = logging.getLogger('OrgSite')
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:
        # Console handler for user-facing messages
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter('%(message)s'))
        logger.addHandler(console_handler)

    if log_dir and not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        # File handler for all logs
        os.makedirs(log_dir, exist_ok=True)
        log_filename = datetime.now().strftime('orgsite_%Y-%m-%d_%H-%M-%S.log')
        file_handler = logging.FileHandler(os.path.join(log_dir, log_filename))
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)

    return logger


def load_template(theme: str, template_name: str, load_directory: Optional[str] = None) -> str:
    """Return the path of template_name for theme. The path is not checked for existence."""
    return os.path.join(load_directory or LOAD_DIRECTORY, TEMPLATE_ROOT, theme, template_name)


def render(template_name: str, context: Dict[str, Any], config: SiteConfig) -> str:
    """Render a theme template against a Mustache context."""
    template_path = load_template(config.theme, template_name, config.load_directory)
    if not os.path.isfile(template_path):
        raise FileNotFoundError(f"Template not found: {template_path}")

    with open(template_path, 'r', encoding='utf-8') as f:
        template = f.read()

    return chevron.render(template, context)


class OrgSite:
    """Build HTML fragments for pages of a loaded org-site project."""

    def __init__(self, config: SiteConfig, project_dir: str):
        self.config = config
        self.project_dir = os.path.abspath(project_dir)
        self.logger = logging.getLogger('OrgSite')

    @property
    def base_url(self):
        return (self.config.site_url or '').rstrip('/')

    def render(self, template_name, context):
        self.logger.debug(f"Rendering {template_name} with theme {self.config.theme}")
        return render(template_name, context, self.config)

    def page_url(self, org_file):
        """
        Site-relative URL of the HTML page published from org_file.

        Raises:
            ValueError: If org_file is not inside the project directory
        """
        rel_path = os.path.relpath(os.path.abspath(org_file), self.project_dir)
        if rel_path == os.pardir or rel_path.startswith(os.pardir + os.sep):
            raise ValueError(f"{org_file} is outside the project directory {self.project_dir}")
        rel_path = os.path.splitext(rel_path)[0] + '.html'
        return '/' + rel_path.replace(os.sep, '/')

    def format_date(self, value):
        return value.strftime(self.config.date_format) if value else ''

    def preamble_context(self, org_file=None):
        return {
            'site-title': self.config.site_title,
            'nav-post': f"{self.base_url}/post/index.html",
            'nav-wiki': f"{self.base_url}/wiki/index.html",
            'nav-tags': f"{self.base_url}/tags/index.html",
            'nav-about': f"{self.base_url}/about.html",
        }

    def comment_context(self, org_file):
        identifier = self.page_url(org_file)
        return {
            'disqus-identifier': identifier,
            'disqus-url': f"{self.base_url}{identifier}",
            'disqus-shortname': self.config.disqus_shortname,
        }

    def meta_info_context(self, org_file):
        """
        Collect the page's dates, tags and author.

        The post date comes from #+DATE and falls back to the file's
        modification time, which is also the update date. Tags are read
        from #+KEYWORDS (or #+TAGS), separated by commas or whitespace.
        """
        options = read_export_options(org_file)
        modified = datetime.fromtimestamp(os.path.getmtime(org_file))
        post_date = parse_org_date(options.get('date', '')) or modified

        raw_tags = options.get('keywords') or options.get('tags') or ''
        tags = [tag for tag in raw_tags.replace(',', ' ').split() if tag]

        return {
            'post-date': self.format_date(post_date),
            'update-date': self.format_date(modified),
            'tags': [{'name': tag, 'url': f"{self.base_url}/tags/{tag}.html"} for tag in tags],
            'author-name': options.get('author') or self.config.author_name,
        }

    def footer_context(self, org_file=None):
        return {
            'author-email': self.config.author_email,
            'author-name': self.config.author_name,
        }

    def postamble_context(self, org_file):
        context = {'footer': self.generate_footer(org_file)}
        if self.config.enable_meta_info:
            context['meta-info'] = self.generate_meta_info(org_file)
        if self.config.enable_comment:
            context['comment'] = self.generate_comment(org_file)
        return context

    def generate_preamble(self, org_file=None):
        return self.render('preamble.html', self.preamble_context(org_file))

    def generate_comment(self, org_file):
        return self.render('comment.html', self.comment_context(org_file))

    def generate_meta_info(self, org_file):
        return self.render('meta-info.html', self.meta_info_context(org_file))

    def generate_footer(self, org_file=None):
        return self.render('footer.html', self.footer_context(org_file))

    def generate_postamble(self, org_file):
        return self.render('postamble.html', self.postamble_context(org_file))

    def generate_fragments(self, org_file):
        """Render the preamble and postamble a publishing pipeline inserts into a page."""
        self.logger.info(f"Generating fragments for {org_file}")
        return {
            'preamble': self.generate_preamble(org_file),
            'postamble': self.generate_postamble(org_file),
        }
