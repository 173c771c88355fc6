"""Command line interface for the crawl element filter."""

from __future__ import annotations

import argparse
import concurrent.futures
import logging
from typing import List, Optional, Sequence

from .core.config import FilterConfig, load_configuration
from .core.session import ScanSession
from .recon.browser import capture_pages
from .recon.fetch import PageFetchError, fetch_page
from .recon.page import Page
from .recon.trainer import Trainer


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Contador de elementos novos por página")
    parser.add_argument("urls", nargs="+", help="URLs a processar (somente alvos autorizados)")
    parser.add_argument("--passes", type=int, default=1, help="Quantidade de passagens sobre as URLs")
    parser.add_argument(
        "--cache",
        action="store_true",
        help="Reutiliza os elementos já extraídos nas passagens seguintes",
    )
    parser.add_argument("--browser", action="store_true", help="Renderiza as páginas com Playwright")
    parser.add_argument("--threads", type=int, default=None, help="Downloads simultâneos")
    parser.add_argument("--reset-policy", choices=["unsynchronized", "locked"], default=None)
    parser.add_argument("--verbose", action="store_true", help="Exibe logs de depuração")
    return parser.parse_args(argv)


def fetch_pages(urls: Sequence[str], config: FilterConfig) -> List[Page]:
    """Fetches every URL concurrently, returning pages in ``urls`` order.

    Failures are reported and skipped.
    """

    pages: List[Page] = []
    with concurrent.futures.ThreadPoolExecutor(max_workers=config.max_threads) as executor:
        futures = [
            executor.submit(
                fetch_page, url, cookies=config.cookies, timeout=config.fetch_timeout
            )
            for url in urls
        ]
        for future in futures:
            try:
                pages.append(future.result())
            except PageFetchError as exc:
                print(f"[!] {exc}")
    return pages


def capture_with_browser(urls: Sequence[str], config: FilterConfig) -> List[Page]:
    return capture_pages(urls, headless=config.headless, cookies=config.cookies)


def run_cli(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = load_configuration(reset_policy=args.reset_policy, max_threads=args.threads)
    acquire = capture_with_browser if args.browser else fetch_pages

    session = ScanSession(config)
    with session as element_filter:
        trainer = Trainer(element_filter)
        pages: List[Page] = []

        for index in range(max(1, args.passes)):
            print(f"\n=== Passagem {index + 1}/{max(1, args.passes)} ===")
            reuse = args.cache and index > 0
            if not reuse:
                pages = acquire(args.urls, config)
            if not pages:
                print(" - Nenhuma página obtida.")
                continue

            for page in pages:
                result = trainer.push(page, use_cache=reuse)
                status = "NOVO" if result.should_train else "VISTO"
                print(f" - {status} :: {result.new_elements} elemento(s) novo(s) em {result.url}")

        print("\n=== Resumo ===")
        for category, total in element_filter.counts().items():
            print(f"    {category.attribute:<8}: {total}")
        print(f"    Páginas para treino: {len(trainer.pages_to_train)}")
    return 0


def main() -> None:
    raise SystemExit(run_cli())


if __name__ == "__main__":
    main()
