"""
Org-mode front matter helpers: export-option boilerplate and title lookup.
"""

import os
import re
from datetime import datetime
from typing import Dict, Optional

# Lines of the form "#+KEY: value"
EXPORT_OPTION_RE = re.compile(r'^\s*#\+([A-Za-z_]+):[ \t]*(.*?)\s*$')
BLOCK_BEGIN_RE = re.compile(r'^\s*#\+BEGIN_(\w+)', re.IGNORECASE)
BLOCK_END_RE = re.compile(r'^\s*#\+END_(\w+)', re.IGNORECASE)

EXPORT_OPTIONS_TEMPLATE = """\
#+TITLE:       {title}
#+AUTHOR:      {author}
#+EMAIL:       {email}
#+DATE:        {date}
#+DESCRIPTION:
#+KEYWORDS:
#+LANGUAGE:    {language}
#+OPTIONS:     H:3 num:t toc:t \\n:nil @:t ::t |:t ^:t -:t f:t *:t <:t
#+OPTIONS:     TeX:t LaTeX:t skip:nil d:nil todo:t pri:nil tags:not-in-toc
#+EXPORT_SELECT_TAGS: export
#+EXPORT_EXCLUDE_TAGS: noexport
"""


def file_stem(path: str) -> str:
    """Return the file name without directory or extension."""
    return os.path.splitext(os.path.basename(path))[0]


def export_options_template(title: str, author: str = '', email: str = '',
                            date: Optional[datetime] = None, language: str = 'en') -> str:
    """Return the standard export-option block for a new Org file."""
    date = date or datetime.now()
    return EXPORT_OPTIONS_TEMPLATE.format(
        title=title,
        author=author,
        email=email,
        date=date.strftime('%Y-%m-%d %a'),
        language=language,
    )


def parse_export_options(text: str) -> Dict[str, str]:
    """
    Parse "#+KEY: value" lines anywhere in the file into a mapping keyed by
    lower-cased KEY.

    Only the first occurrence of a key is kept. Lines inside
    #+BEGIN_.../#+END_... blocks are skipped.
    """
    options = {}
    block = None
    for line in text.splitlines():
        if block:
            end = BLOCK_END_RE.match(line)
            if end and end.group(1).lower() == block:
                block = None
            continue
        begin = BLOCK_BEGIN_RE.match(line)
        if begin:
            block = begin.group(1).lower()
            continue
        match = EXPORT_OPTION_RE.match(line)
        if match:
            options.setdefault(match.group(1).lower(), match.group(2))
    return options


def read_export_options(org_file: str) -> Dict[str, str]:
    """Read the front matter export options of an Org file."""
    with open(org_file, 'r', encoding='utf-8') as f:
        return parse_export_options(f.read())


def get_title(org_file: str) -> str:
    """Return the declared #+TITLE of an Org file, or its name without extension."""
    title = read_export_options(org_file).get('title', '')
    return title or file_stem(org_file)


def parse_org_date(value: str) -> Optional[datetime]:
    """Parse an Org date such as "<2013-02-17 Sun>" or "2013-02-17 10:30"."""
    value = re.sub(r'[<>\[\]]', '', value or '').strip()
    for fmt in ['%Y-%m-%d %a %H:%M', '%Y-%m-%d %a', '%Y-%m-%d %H:%M', '%Y-%m-%d']:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None
