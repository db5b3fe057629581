"""Locale Routing Example - Strategies, Fallback and Static Builds.

Demonstrates real-world usage of RoutingEngine for a site mounted under a
base path with partially translated content.

Scenarios covered:
1. Default locale unprefixed, Italian falling back to English
2. Every locale prefixed, root redirect and meta-refresh output
3. Locale per domain behind a reverse proxy
4. Static build planning and fallback observability

Note on Decisions:
    Decisions are values, never exceptions. A live server maps them to
    status codes and headers; a static build writes Redirect.to_html()
    where a page would go.

Python 3.13+.
"""

from __future__ import annotations

from localeroute import LocaleConfig, RequestContext, RouteTable, RoutingEngine
from localeroute.parsing import get_preferred_locales
from localeroute.routing import FallbackInfo, PageLocales, Redirect, plan_static_pages

CONTENT = RouteTable.from_mapping(
    {
        "en": ["/", "/start", "/blog/*"],
        "pt": ["/", "/start"],
        "it": ["/"],
    }
)


def example_1_prefix_other_locales() -> None:
    """Example 1: Default locale at the root, fallback it -> en."""
    print("=" * 60)
    print("Example 1: prefix-other-locales with fallback (it -> en)")
    print("=" * 60)

    config = LocaleConfig(
        default_locale="en",
        locales=["en", "pt", "it"],
        fallback={"it": "en"},
        base="/new-site",
    )
    engine = RoutingEngine(config, CONTENT)

    for path in (
        "/new-site",
        "/new-site/start",
        "/new-site/pt/start",
        "/new-site/it/start",
        "/new-site/en/start",
        "/new-site/fr/start",
    ):
        decision = engine.resolve(path)
        print(f"  {path:<22} -> {decision}")


def example_2_prefix_always() -> None:
    """Example 2: Root redirect, live and static forms."""
    print("\n" + "=" * 60)
    print("Example 2: prefix-always root redirect")
    print("=" * 60)

    config = LocaleConfig(
        default_locale="en",
        locales=["en", "pt", "it"],
        routing_strategy="prefix-always",
        base="/new-site",
        trailing_slash="always",
    )
    decision = RoutingEngine(config, CONTENT).resolve("/new-site/")
    if isinstance(decision, Redirect):
        print(f"  live:   {decision.status} {decision.headers}")
        print(f"  static: {decision.to_html()[:80]}...")


def example_3_domains() -> None:
    """Example 3: Locale chosen by the forwarded host."""
    print("\n" + "=" * 60)
    print("Example 3: domains behind a proxy")
    print("=" * 60)

    config = LocaleConfig(
        default_locale="en",
        locales=["en", "pt", "it"],
        routing_strategy="domains",
        fallback={"it": "en"},
        domains={
            "en": "https://example.com",
            "pt": "https://example.pt",
            "it": "https://it.example.com",
        },
    )
    engine = RoutingEngine(config, CONTENT)

    for headers in (
        {"Host": "example.pt:8080", "X-Forwarded-Proto": "https"},
        {"Host": "internal:9000", "X-Forwarded-Host": "it.example.com"},
        {"Host": "example.fr"},
    ):
        context = RequestContext.from_headers("/start", headers)
        print(f"  {context.host:<16} -> {engine.resolve(context)}")

    context = RequestContext.from_headers(
        "/pt/start", {"Host": "example.pt", "Accept-Language": "it;q=0.4, pt-BR, en;q=0.8"}
    )
    preferred = get_preferred_locales(context.accept_language, config)
    print(f"  preferred: {preferred.describe_primary()} ({preferred.describe_list()})")
    print(f"  page facts: {PageLocales.for_request(config, context, engine.resolve(context))}")


def example_4_static_build() -> None:
    """Example 4: Plan a static build and observe fallbacks."""
    print("\n" + "=" * 60)
    print("Example 4: static build with rewrite fallback")
    print("=" * 60)

    config = LocaleConfig(
        default_locale="en",
        locales=["en", "pt", "it"],
        routing_strategy="prefix-always",
        fallback={"it": "en"},
        fallback_type="rewrite",
    )

    def report(info: FallbackInfo) -> None:
        print(f"  fallback: {info.path} {info.requested_locale} -> {info.resolved_locale}")

    RoutingEngine(config, CONTENT, on_fallback=report).resolve("/it/start")

    for page in plan_static_pages(config, ["/", "/start"], CONTENT):
        kind = "redirect" if page.is_redirect else "page"
        print(f"  {page.output_file:<22} {kind}")


if __name__ == "__main__":
    example_1_prefix_other_locales()
    example_2_prefix_always()
    example_3_domains()
    example_4_static_build()
