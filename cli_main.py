import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from firmware_dump import read_dump
from parsers import get_parsed_smbios_info, hex_rows
from smbios_errors import SmbiosError
from structures import SmbiosVersion

console = Console()


def setup_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=verbose)],
        force=True,
    )


def print_hex_rich(title, data):
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Offset", style="dim", width=8)
    table.add_column("Hex", width=48, style="cyan")
    table.add_column("ASCII", width=16)

    for offset, hex_part, ascii_part in hex_rows(data):
        table.add_row(offset, hex_part, Text(ascii_part))

    console.print(table)


def structure_title(record):
    return f"Type {record.code} (Handle 0x{record.handle:04X}) - {record.info}"


def print_table_info(smbios):
    console.print(f"[bold]SMBIOS {smbios.version}[/bold] ({smbios.source})")
    console.print(f"Table Length: {smbios.length} bytes")
    if smbios.count is not None:
        console.print(f"Structure Count: {smbios.count}")


def cmd_summary(smbios, types=None):
    table = Table(title="SMBIOS Structures", show_header=True)
    table.add_column("Handle", style="green")
    table.add_column("Type", justify="right")
    table.add_column("Name")
    table.add_column("Length", justify="right")

    try:
        for record in smbios.structures():
            if types and record.code not in types:
                continue
            table.add_row(f"0x{record.handle:04X}", str(record.code), str(record.info),
                          str(len(record.data) + 4))
    except SmbiosError as e:
        console.print(table)
        console.print(f"[bold red]Error walking SMBIOS table: {escape(str(e))}[/bold red]")
        return 1

    console.print(table)
    return 0


def print_structure(record, show_hex=False, long_flags=False):
    details = get_parsed_smbios_info(record, long_flags)

    console.rule(Text(structure_title(record), style="bold"))
    table = Table(show_header=False)
    table.add_column("Field", style="green")
    table.add_column("Value")

    # Print Details or Fallback
    if details:
        for key, val in details:
            table.add_row(key, Text(val))
    else:
        table.add_row("Length", f"0x{len(record.data) + 4:X}")
        for i, s in enumerate(record.iter_strings(), 1):
            table.add_row(f"String {i}", Text(s))
    console.print(table)

    if show_hex:
        print_hex_rich(f"Formatted Section (Handle 0x{record.handle:04X})", record.data)


def cmd_structures(smbios, types=None, show_hex=False, long_flags=False):
    structure_count = 0
    try:
        for record in smbios.structures():
            if types and record.code not in types:
                continue
            print_structure(record, show_hex, long_flags)
            structure_count += 1
    except SmbiosError as e:
        console.print(f"[bold red]Error walking SMBIOS table: {escape(str(e))}[/bold red]")
        return 1

    console.print(f"Finished. Parsed {structure_count} structures.")
    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="smbios-dump", description="SMBIOS Table Viewer Tool")
    parser.add_argument("dump", help="SMBIOS dump: dmidecode --dump-bin output, sysfs DMI table or RSMB blob")
    parser.add_argument("--entry", metavar="FILE", help="Separate entry point file (e.g. smbios_entry_point)")
    parser.add_argument("--base", metavar="ADDR", type=lambda s: int(s, 0), default=0,
                        help="Physical address the dump was captured from")
    parser.add_argument("--smbios-version", metavar="X.Y", type=SmbiosVersion.parse,
                        help="Override the SMBIOS version of the table")
    parser.add_argument("-t", "--type", dest="types", metavar="TYPE", type=int, action="append",
                        help="Only show structures of this type (repeatable)")
    parser.add_argument("--summary", action="store_true", help="List structures only")
    parser.add_argument("--hex", action="store_true", help="Also dump each formatted section")
    parser.add_argument("--long", action="store_true", help="Long flag descriptions and reserved bit ranges")
    parser.add_argument("--gui", action="store_true", help="Launch GUI mode")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        smbios = read_dump(args.dump, args.entry, base=args.base, version=args.smbios_version)
    except OSError as e:
        console.print(f"[bold red]Could not read SMBIOS dump: {escape(str(e))}[/bold red]")
        return 1
    except SmbiosError as e:
        console.print(f"[bold red]Invalid SMBIOS dump: {escape(str(e))}[/bold red]")
        return 1

    if args.gui:
        # Launch GUI
        try:
            from gui_main import run_gui
        except ImportError as e:
            console.print(f"[bold red]GUI not available ({escape(str(e))}); install the 'gui' extra.[/bold red]")
            return 1
        return run_gui(smbios, args.long)

    print_table_info(smbios)
    if args.summary:
        return cmd_summary(smbios, args.types)
    return cmd_structures(smbios, args.types, args.hex, args.long)


if __name__ == "__main__":
    sys.exit(main())
