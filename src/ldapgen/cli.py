#! /usr/bin/env python3

import argparse
import logging
import os
import sys

import coloredlogs

from ldapgen import VERSION
from ldapgen.config import RunConfig, DEFAULT_LDIF_FILE, DEFAULT_TIMEOUT, MODE_FILE
from ldapgen.errors import LdapGenError
from ldapgen.run import run
from ldapgen.template import load_template

LOGGER = logging.getLogger(__name__)


def get_default_log_level():
    return os.environ.get('LDAPGEN_LOG_LEVEL') or 'INFO'


def build_parser():
    parser = argparse.ArgumentParser(
        prog='ldapgen',
        description='Generate fake LDAP entries and either write LDIF or send them to an LDAP server.')
    parser.add_argument('--version', action='version', version='%(prog)s ' + VERSION)
    parser.add_argument(
        '--suffix-dn', type=str, required=True,
        help="DN suffix after uid=<uid>, e.g. 'ou=employee,ou=users,o=rtx'")
    parser.add_argument('--count', type=int, default=1, help='number of entries to generate')
    parser.add_argument(
        '--mode', type=str, default=MODE_FILE,
        help="'file' to write LDIF, 'network' to add entries to an LDAP server")
    parser.add_argument('--ldif-file', type=str, default=DEFAULT_LDIF_FILE)
    parser.add_argument('--ldap-url', type=str, help="e.g. 'ldaps://localhost:636'")
    parser.add_argument('--bind-dn', type=str)
    parser.add_argument('--bind-password', type=str)
    parser.add_argument(
        '--input-file', type=str,
        help='JSON file with uid, cn, sn, mail values; missing ones are faked')
    parser.add_argument('--seed', type=int, default=0)
    parser.add_argument(
        '--random-seed', action='store_true',
        help='seed from the current time instead of --seed')
    parser.add_argument('--timeout', type=float, default=DEFAULT_TIMEOUT)
    parser.add_argument('--tls-require-cert', action='store_true')
    parser.add_argument('--log-path', type=str, default='ldapgen.log')
    parser.add_argument('--log-level', type=str, default=get_default_log_level())
    return parser


def build_config(args) -> RunConfig:
    template = None
    if args.input_file:
        template = load_template(args.input_file)

    return RunConfig(
        suffix_dn=args.suffix_dn,
        count=args.count,
        mode=args.mode,
        ldif_file=args.ldif_file,
        ldap_url=args.ldap_url,
        bind_dn=args.bind_dn,
        bind_password=args.bind_password,
        template=template,
        seed=None if args.random_seed else args.seed,
        timeout=args.timeout,
        tls_require_cert=args.tls_require_cert,
    )


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        filename=args.log_path,
        filemode='a',
        format='%(asctime)s.%(msecs)03d %(levelname)s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        level=logging.DEBUG)

    coloredlogs.install(level=args.log_level.upper())

    try:
        config = build_config(args)
        batch = run(config)
    except LdapGenError as err:
        LOGGER.error('%s error: %s', err.kind, err)
        return 1

    if config.mode == MODE_FILE:
        print('LDIF file generated: %s (%d entries)' % (config.ldif_file, len(batch)))
    else:
        print('added %d entries to %s' % (len(batch), config.ldap_url))
    return 0


if __name__ == '__main__':
    try:
        sys.exit(main())
    except Exception as err:
        LOGGER.fatal('error! %s', err, exc_info=True)
        sys.exit(1)
