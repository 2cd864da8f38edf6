#!/usr/bin/env python3
import argparse
import json
import logging
import sys

from webspaces.core.config import settings
from webspaces.core.errors import WebspaceError
from webspaces.schemas.portal_information import PortalInformationOut
from webspaces.services.webspace_loader_service import build_collection


def main() -> int:
    parser = argparse.ArgumentParser(description='Build the webspace collection and print its url lookup.')
    parser.add_argument('--path', default=settings.WEBSPACE_CONFIG_PATH, help='Directory with webspace JSON files.')
    parser.add_argument('--environment', default=settings.WEBSPACE_ENVIRONMENT, help='Environment to print.')
    parser.add_argument('--format', choices=['table', 'json'], default='table')
    args = parser.parse_args()

    logging.basicConfig(level=settings.LOG_LEVEL, format='%(levelname)s %(name)s: %(message)s')

    try:
        collection = build_collection(args.path, settings.available_templates)
        entries = collection.get_portal_informations(args.environment)
    except WebspaceError as exc:
        print(f'error: {exc}', file=sys.stderr)
        return 1

    rows = [PortalInformationOut.from_match(info) for info in entries.values()]
    if args.format == 'json':
        print(json.dumps([row.model_dump() for row in rows], indent=2))
        return 0

    width = max((len(row.url) for row in rows), default=3)
    for row in rows:
        locale = row.localization.locale if row.localization else '-'
        target = f' -> {row.redirect}' if row.type == 'redirect' else ''
        print(f'{row.url:<{width}}  {row.type:<8}  {row.priority:>2}  {row.portal:<16}  {locale}{target}')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
