#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

""" Reads `application/x-www-form-urlencoded` data and prints the decoded pairs as a JSON object.

The decoding limits of the global settings apply.
"""

import json
import sys
from argparse import ArgumentParser, Namespace

from structlog import get_logger

logger = get_logger()


def create_parser() -> ArgumentParser:
    from urlform.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('data', nargs='?', help='urlencoded data to decode, read from stdin when omitted')
    parser.add_argument('--indent', type=int, help='Indentation of the JSON output')
    return parser


def execute(args: Namespace) -> int:
    from urlform.conf import get_global_settings
    from urlform.conf.get_settings import get_settings_source
    from urlform.encoding import decode_form

    if args.data is not None:
        raw = args.data
    else:
        # a trailing newline is not part of the data
        raw = sys.stdin.read().rstrip('\r\n')

    settings = get_global_settings()
    logger.debug('decoding with settings', source=get_settings_source(), max_bytes=settings.MAX_FORM_BYTES,
                 max_pairs=settings.MAX_FORM_PAIRS)
    result = decode_form(raw.encode('utf-8'), max_bytes=settings.MAX_FORM_BYTES, max_pairs=settings.MAX_FORM_PAIRS)
    if result.is_err():
        logger.debug('could not decode form', error=result.unwrap_err())
        print(result.unwrap_err(), file=sys.stderr)
        return 1

    form = result.unwrap()
    print(json.dumps(dict(form.items()), indent=args.indent, ensure_ascii=False))
    return 0


def main() -> int:
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)
