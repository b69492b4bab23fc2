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

""" Reads a JSON object with string values and prints it encoded as `application/x-www-form-urlencoded`.
"""

import json
import sys
from argparse import ArgumentParser, Namespace


def create_parser() -> ArgumentParser:
    from urlform.cli.util import create_parser
    parser = create_parser()
    parser.add_argument('data', nargs='?', help='JSON object to encode, read from stdin when omitted')
    return parser


def execute(args: Namespace) -> int:
    from urlform.encoding import encode_form
    from urlform.form import Form

    raw = args.data if args.data is not None else sys.stdin.read()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        print(f'invalid JSON: {e}', file=sys.stderr)
        return 1

    if not isinstance(data, dict) or not all(isinstance(value, str) for value in data.values()):
        print('expected a JSON object with string values', file=sys.stderr)
        return 1

    print(encode_form(Form(data)).decode('ascii'))
    return 0


def main() -> int:
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)
