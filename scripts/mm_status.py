#!/usr/bin/env python3
"""
Money management status viewer.

Prints the level ladder, or the status of one account given either
explicit figures or a live MT5 terminal.
"""

import argparse
import json
import logging
import os
import sys
import time

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import account as account_config
from config.money_management import get_params
from core.account_snapshot import AccountSnapshot
from core.formatting import format_currency
from core.level_table import get_level_table
from core.mt5_account import MT5AccountSource, MT5Credentials
from core.status import build_status


logger = logging.getLogger(__name__)


def print_levels(table):
    print("\n" + "=" * 70)
    print("  MONEY MANAGEMENT LEVELS")
    print("=" * 70)
    print(f"  {'Lvl':>3}  {'Balance':>14}  {'Lot':>6}  {'Daily':>11}  {'Weekly':>11}  {'Monthly':>12}")
    for tier in table:
        print(
            f"  {tier.level:>3}  {format_currency(tier.balance_threshold):>14}  {tier.lot_size:>6}  "
            f"{format_currency(tier.daily_target):>11}  {format_currency(tier.weekly_target):>11}  "
            f"{format_currency(tier.monthly_target):>12}"
        )
    print("=" * 70 + "\n")


def print_status(status):
    current = status.current_level
    upcoming = status.next_level
    permission = status.trade_permission
    emoji = "🟢" if permission.allowed else "🔴"

    print("\n" + "=" * 70)
    print(f"  {emoji} [{status.account_id or 'ACCOUNT'}] LEVEL {current.level}")
    print("=" * 70)
    print(f"   Balance: {format_currency(status.balance)} | Lot size: {status.recommended_lot_size}")
    if upcoming is None:
        print("   Next level: max level reached")
    else:
        print(f"   Next level: {upcoming.level} at {format_currency(upcoming.balance_threshold)} "
              f"({status.progress_to_next_level:.1f}%)")

    progress = status.account_progress
    print(f"   Daily:   {format_currency(progress.daily_profit)} / {format_currency(current.daily_target)} "
          f"({status.daily_target_progress:.1f}%) | remaining {format_currency(status.remaining_daily_target)}")
    print(f"   Weekly:  {format_currency(progress.weekly_profit)} / {format_currency(current.weekly_target)} "
          f"({status.weekly_target_progress:.1f}%)")
    print(f"   Monthly: {format_currency(progress.monthly_profit)} / {format_currency(current.monthly_target)} "
          f"({status.monthly_target_progress:.1f}%)")
    print(f"   Open positions: {progress.open_positions}")

    if permission.allowed:
        print("\n   Trading: ALLOWED")
    else:
        print("\n   Trading: BLOCKED")
        for reason in permission.reasons:
            print(f"     • {reason}")
    print("=" * 70 + "\n")


def snapshot_from_args(args) -> AccountSnapshot:
    return AccountSnapshot.from_payload({
        'account_id': args.account_id,
        'balance': args.balance,
        'equity': args.equity if args.equity is not None else args.balance,
        'daily_profit': args.daily_profit,
        'weekly_profit': args.weekly_profit,
        'monthly_profit': args.monthly_profit,
        'open_positions': args.open_positions,
    })


def mt5_source() -> MT5AccountSource:
    credentials = MT5Credentials(
        login=account_config.MT5_LOGIN,
        password=account_config.MT5_PASSWORD,
        server=account_config.MT5_SERVER,
        path=account_config.MT5_PATH,
    )
    return MT5AccountSource(credentials, symbol=account_config.SYMBOL)


def emit(status, as_json: bool):
    if as_json:
        print(json.dumps(status.to_dict(), indent=2, default=str))
    else:
        print_status(status)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Show money management level, targets and trading gates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/mm_status.py --levels
  python scripts/mm_status.py --balance 150 --daily-profit 4.50
  python scripts/mm_status.py --balance 1200 --open-positions 1 --json
  python scripts/mm_status.py --mt5 --watch
        """
    )
    parser.add_argument('--levels', action='store_true', help='Print the level table and exit')
    parser.add_argument('--profile', type=str, default=account_config.MM_PROFILE,
                        help='Money management profile (default: reference table)')
    parser.add_argument('--account-id', type=str, default=account_config.ACCOUNT_NAME)
    parser.add_argument('--balance', type=float, default=0.0)
    parser.add_argument('--equity', type=float, default=None)
    parser.add_argument('--daily-profit', type=float, default=0.0)
    parser.add_argument('--weekly-profit', type=float, default=0.0)
    parser.add_argument('--monthly-profit', type=float, default=0.0)
    parser.add_argument('--open-positions', type=int, default=0)
    parser.add_argument('--use-equity', action='store_true', default=None,
                        help='Select the level by equity instead of balance')
    parser.add_argument('--mt5', action='store_true', help='Read the account from the MT5 terminal')
    parser.add_argument('--watch', action='store_true',
                        help=f'With --mt5, refresh every {account_config.POLL_INTERVAL}s')
    parser.add_argument('--json', action='store_true', help='Print status as JSON')
    parser.add_argument('--verbose', action='store_true')
    parser.add_argument('--debug', action='store_true')

    args = parser.parse_args(argv)
    if args.watch and not args.mt5:
        parser.error("--watch requires --mt5")

    level = logging.DEBUG if args.debug else logging.INFO if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    table = get_level_table(args.profile)
    params = get_params(args.profile)
    use_equity = args.use_equity if args.use_equity is not None else params['use_equity']
    max_open = params['max_open_positions']

    if args.levels:
        print_levels(table)
        return 0

    if not args.mt5:
        emit(build_status(snapshot_from_args(args), table, use_equity, max_open), args.json)
        return 0

    with mt5_source() as source:
        while True:
            emit(build_status(source.snapshot(), table, use_equity, max_open), args.json)
            if not args.watch:
                break
            time.sleep(account_config.POLL_INTERVAL)

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Stopped")
        sys.exit(0)
