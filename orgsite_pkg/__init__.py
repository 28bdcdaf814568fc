"""
org-site - utilities for an Org-mode static site.

Scaffolds new site projects, loads their configuration, creates Org content
files, and renders the HTML fragments (preamble, postamble, footer, meta-info,
comments) inserted into published pages using Mustache theme templates.
"""

__version__ = "0.2.0"

from .settings import SiteConfig, OrgSiteSettings
from .core import OrgSite, load_template, render
from .project import Project, new_project, load_project, new_org_file, new_post, new_wiki
from .orgfile import get_title

__all__ = [
    'SiteConfig', 'OrgSiteSettings', 'OrgSite', 'load_template', 'render',
    'Project', 'new_project', 'load_project', 'new_org_file', 'new_post', 'new_wiki',
    'get_title',
]
