"""Command line interface for xsv_locatable.

Current subcommands:
	header  – validate a table against its sidecar config and print its header
	summary – decode a table, write feature / per-contig TSVs and QC plots

Example:
	python -m xsv_locatable.cli summary --table genes.tsv --out outdir
"""

from __future__ import annotations

import argparse
from pathlib import Path
from concurrent.futures import ProcessPoolExecutor, as_completed

from .core import XsvLocatableTableCodec
from .exceptions import XsvCodecError
from .io import LineIterator, get_config_file_path
from .metrics import features_to_frame, contig_summary
from .plot import plot_features_per_contig, plot_feature_length_distribution
from .utils import log_error, log_info


def _exec_plot(func, kwargs):
	func(**kwargs)


def _run_plot_tasks(tasks, threads: int):
	if threads <= 1:
		for f, kw in tasks:
			f(**kw)
		return
	with ProcessPoolExecutor(max_workers=threads) as ex:
		futs = [ex.submit(_exec_plot, f, kw) for f, kw in tasks]
		for fut in as_completed(futs):
			_ = fut.result()


def _not_decodable(table: str) -> int:
	log_error(f"{table} is not a decodable XSV table (expected readable file and sidecar {get_config_file_path(table)})")
	return 1


def cmd_header(args: argparse.Namespace) -> int:
	codec = XsvLocatableTableCodec()
	session = codec.open_session(args.table)
	if session is None:
		return _not_decodable(args.table)
	with LineIterator(args.table) as lines:
		header = codec.read_header(session, lines)
	layout = session.layout
	for idx, name in enumerate(header):
		role = []
		if idx == layout.contig_column:
			role.append("contig")
		if idx == layout.start_column:
			role.append("start")
		if idx == layout.end_column:
			role.append("end")
		suffix = f"\t[{','.join(role)}]" if role else ""
		print(f"{idx}\t{name}{suffix}")
	return 0


def cmd_summary(args: argparse.Namespace) -> int:
	outdir = Path(args.out)
	outdir.mkdir(parents=True, exist_ok=True)

	codec = XsvLocatableTableCodec(strict=args.strict)
	if not codec.can_decode(args.table):
		return _not_decodable(args.table)
	header, features = codec.read_table(args.table)
	log_info(f"Decoded {len(features):,} features with {len(header)} columns from {args.table}")

	features_df = features_to_frame(features, header=header)
	summary_df = contig_summary(features_df)
	features_df.to_csv(outdir / 'features.tsv', sep='\t', index=False)
	summary_df.to_csv(outdir / 'contig_summary.tsv', sep='\t', index=False)

	if args.no_plots:
		log_info(f"Tables written to {outdir}")
		return 0

	tasks = [
		(plot_features_per_contig, {
			'summary': summary_df,
			'output_path': str(outdir / 'features_per_contig.png'),
		}),
		(plot_feature_length_distribution, {
			'features': features_df[['Length']],
			'output_path': str(outdir / 'feature_length_distribution.png'),
			'logx': args.log_length,
			'enable_smart_cutoff': not args.no_smart_cutoff,
		}),
	]
	_run_plot_tasks(tasks, getattr(args, 'threads', 1))
	log_info(f"Summary tables and plots written to {outdir}")
	return 0


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="xsv_locatable", description="XSV locatable table toolkit")
	sub = p.add_subparsers(dest="command")
	sp = sub.add_parser("header", help="Print the header of a configured XSV table")
	sp.add_argument("--table", required=True, help="Input table (its .config sidecar must sit next to it)")
	sp.set_defaults(func=cmd_header)

	sp2 = sub.add_parser("summary", help="Decode a table and write feature / contig summaries and plots")
	sp2.add_argument("--table", required=True, help="Input table (plain or .gz; its .config sidecar must sit next to it)")
	sp2.add_argument("--out", required=True, help="Output directory")
	sp2.add_argument("--strict", action="store_true", help="Fail on lines whose field count differs from the header")
	sp2.add_argument("--threads", type=int, default=1, help="Parallel plot generation processes")
	sp2.add_argument("--no-plots", action="store_true", help="Only write the TSV tables")
	sp2.add_argument("--log-length", action="store_true", help="Log-scale x axis for the length distribution")
	sp2.add_argument("--no-smart-cutoff", action="store_true", help="Disable smart cutoff (99.5th percentile) on feature lengths")
	sp2.set_defaults(func=cmd_summary)
	return p


def main(argv=None):
	parser = build_parser()
	args = parser.parse_args(argv)
	if not hasattr(args, 'func'):
		parser.print_help()
		return 1
	try:
		return args.func(args)
	except XsvCodecError as e:
		log_error(str(e))
		return 1


if __name__ == "__main__":  # pragma: no cover
	raise SystemExit(main())
