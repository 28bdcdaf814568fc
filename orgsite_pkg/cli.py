#!/usr/bin/env python3
"""
Command-line interface for org-site.
"""

import os
import sys
import argparse
from typing import List, Optional

from . import __version__
from .core import OrgSite, setup_logging
from .orgfile import get_title
from .project import load_project, new_post, new_project, new_wiki

FRAGMENTS = ['preamble', 'postamble', 'footer', 'meta-info', 'comment']


def prompt_directory(default: str) -> str:
    """Ask for a project directory, falling back to default on empty input."""
    answer = input(f"Load project (default {default}): ").strip()
    return os.path.expanduser(answer) if answer else default


def config_overrides(args) -> dict:
    """Settings given on the command line, overriding the project's config file."""
    return {'theme': args.theme, 'load_directory': args.load_dir}


def cmd_new(args) -> None:
    directory = new_project(args.directory or args.project)
    print(f"Created project: {directory}")
    print("\nNext steps:")
    print("1. Edit the configuration file (orgsite.yml)")
    print("2. Write posts with 'orgsite post' and wiki entries with 'orgsite wiki'")


def cmd_load(args) -> None:
    directory = args.directory
    if args.interactive and not directory:
        directory = prompt_directory(args.project)
    project = load_project(directory or args.project, config_overrides(args))
    config = project.config
    print(f"Project:  {project.directory}")
    print(f"Config:   {project.config_file}")
    print(f"Title:    {config.site_title}")
    print(f"Theme:    {config.theme}")
    print(f"Author:   {config.author_name} <{config.author_email}>")
    print(f"Meta-info enabled: {config.enable_meta_info}")
    print(f"Comments enabled:  {config.enable_comment}")


def cmd_post(args) -> None:
    project = load_project(args.project, config_overrides(args))
    path = new_post(project, args.name, view=not args.no_edit)
    print(f"Created post: {path}")


def cmd_wiki(args) -> None:
    project = load_project(args.project, config_overrides(args))
    path = new_wiki(project, args.name, view=not args.no_edit)
    print(f"Created wiki entry: {path}")


def cmd_render(args) -> None:
    project = load_project(args.project, config_overrides(args))
    site = OrgSite(project.config, project.directory)
    generator = getattr(site, 'generate_' + args.fragment.replace('-', '_'))
    print(generator(args.org_file))


def cmd_title(args) -> None:
    print(get_title(args.org_file))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='orgsite', description='org-site - Org-mode static site utilities')
    parser.add_argument('--project', type=str, default=os.getcwd(),
                        help='Project directory (defaults to the current directory)')
    parser.add_argument('--theme', type=str,
                        help='Theme to render with (overrides the config file)')
    parser.add_argument('--load-dir', type=str,
                        help='Directory holding template/<theme>/ (overrides the config file)')
    parser.add_argument('--log-dir', type=str,
                        help='Directory for debug log files')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', required=True)

    new_parser = subparsers.add_parser('new', help='Create a new project')
    new_parser.add_argument('directory', nargs='?', help='Project directory')
    new_parser.set_defaults(func=cmd_new)

    load_parser = subparsers.add_parser('load', help='Load a project and show its settings')
    load_parser.add_argument('directory', nargs='?', help='Project directory')
    load_parser.add_argument('-i', '--interactive', action='store_true',
                             help='Prompt for the project directory')
    load_parser.set_defaults(func=cmd_load)

    for name, func, help_text in [('post', cmd_post, 'Create a new post'),
                                  ('wiki', cmd_wiki, 'Create a new wiki entry')]:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument('name', nargs='?', help='File name (prompted for when omitted)')
        sub.add_argument('--no-edit', action='store_true',
                         help='Do not open the new file in $EDITOR')
        sub.set_defaults(func=func)

    render_parser = subparsers.add_parser('render', help='Render an HTML fragment for an Org file')
    render_parser.add_argument('fragment', choices=FRAGMENTS)
    render_parser.add_argument('org_file')
    render_parser.set_defaults(func=cmd_render)

    title_parser = subparsers.add_parser('title', help='Print the title of an Org file')
    title_parser.add_argument('org_file')
    title_parser.set_defaults(func=cmd_title)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_dir)

    try:
        args.func(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
