"""
Audit classifier — maps a Lighthouse audit id to exactly one category.

Some ids appear in more than one Lighthouse category (`viewport` is listed
under performance, SEO and PWA; `document-title` under accessibility and SEO).
Tables are scanned in CATEGORY_TABLES order and the first match wins.
"""

from ..models import CategoryTag


PERFORMANCE_AUDITS = frozenset({
    "first-contentful-paint", "largest-contentful-paint", "speed-index",
    "total-blocking-time", "max-potential-fid", "cumulative-layout-shift",
    "interactive", "server-response-time", "redirects", "uses-rel-preconnect",
    "uses-rel-preload", "font-display", "diagnostics", "network-requests",
    "network-rtt", "network-server-latency", "main-thread-tasks", "bootup-time",
    "uses-long-cache-ttl", "total-byte-weight", "dom-size", "critical-request-chains",
    "user-timings", "metrics", "screenshot-thumbnails", "final-screenshot",
    "resource-summary", "third-party-summary", "third-party-facades",
    "largest-contentful-paint-element", "lcp-lazy-loaded", "layout-shift-elements",
    "long-tasks", "non-composited-animations", "unsized-images",
    "preload-lcp-image", "full-page-screenshot", "script-treemap-data",
    "prioritize-lcp-image", "render-blocking-resources", "uses-responsive-images",
    "offscreen-images", "unminified-css", "unminified-javascript",
    "unused-css-rules", "unused-javascript", "modern-image-formats",
    "uses-optimized-images", "uses-text-compression", "uses-responsive-images-snapshot",
    "efficient-animated-content", "duplicated-javascript", "legacy-javascript",
    "viewport", "layout-shift-culprits", "document-latency",
    "optimize-dom-size", "duplicated-javascript-insight", "font-display-insight",
    "forced-reflow", "image-delivery", "inp-breakdown", "lcp-breakdown",
    "lcp-discovery", "legacy-javascript-insight", "modern-http",
    "network-dependency-tree", "render-blocking-insight", "slow-css-selector",
    "third-parties-insight", "viewport-mobile",
})

ACCESSIBILITY_AUDITS = frozenset({
    "accesskeys", "aria-allowed-attr", "aria-allowed-role", "aria-command-name",
    "aria-dialog-name", "aria-hidden-body", "aria-hidden-focus", "aria-input-field-name",
    "aria-meter-name", "aria-progressbar-name", "aria-prohibited-attr", "aria-required-attr",
    "aria-required-children", "aria-required-parent", "aria-roles", "aria-text",
    "aria-toggle-field-name", "aria-tooltip-name", "aria-treeitem-name",
    "aria-valid-attr-value", "aria-valid-attr", "button-name", "bypass", "color-contrast",
    "definition-list", "dlitem", "document-title", "duplicate-id-active", "duplicate-id-aria",
    "empty-heading", "form-field-multiple-labels", "frame-title", "heading-order",
    "html-has-lang", "html-lang-valid", "html-xml-lang-mismatch", "identical-links-same-purpose",
    "image-alt", "image-redundant-alt", "input-button-name", "input-image-alt",
    "label-content-name-mismatch", "label", "landmark-one-main", "link-name",
    "link-in-text-block", "list", "listitem", "meta-refresh", "meta-viewport", "object-alt",
    "select-name", "skip-link", "tabindex", "table-duplicate-name", "table-fake-caption",
    "target-size", "td-has-header", "td-headers-attr", "th-has-data-cells", "valid-lang",
    "video-caption", "custom-controls-labels", "custom-controls-roles", "focus-traps",
    "focusable-controls", "interactive-element-affordance", "logical-tab-order",
    "managed-focus", "offscreen-content-hidden", "use-landmarks", "visual-order-follows-dom",
})

BEST_PRACTICES_AUDITS = frozenset({
    "is-on-https", "redirects-http", "geolocation-on-start", "notification-on-start",
    "no-document-write", "no-vulnerable-libraries", "js-libraries", "deprecations",
    "third-party-cookies", "errors-in-console", "image-aspect-ratio", "image-size-responsive",
    "doctype", "charset", "no-unload-listeners", "paste-preventing-inputs", "inspector-issues",
    "csp-xss", "hsts", "coop-coep", "xfo", "trusted-types",
})

SEO_AUDITS = frozenset({
    "viewport", "document-title", "meta-description", "http-status-code", "link-text",
    "crawlable-anchors", "is-crawlable", "robots-txt", "hreflang", "canonical",
    "font-size", "plugins", "tap-targets", "structured-data",
})

PWA_AUDITS = frozenset({
    "installable-manifest", "splash-screen", "themed-omnibox", "content-width",
    "viewport", "apple-touch-icon", "service-worker", "offline-start-url",
    "without-javascript", "maskable-icon",
})

# Precedence order. Changing it reclassifies every id listed in two tables.
CATEGORY_TABLES: tuple[tuple[CategoryTag, frozenset[str]], ...] = (
    ("performance", PERFORMANCE_AUDITS),
    ("accessibility", ACCESSIBILITY_AUDITS),
    ("best-practices", BEST_PRACTICES_AUDITS),
    ("seo", SEO_AUDITS),
    ("pwa", PWA_AUDITS),
)

FALLBACK_CATEGORY: CategoryTag = "other"


def classify(audit_id: str, tables=CATEGORY_TABLES) -> CategoryTag:
    """Return the category of `audit_id`; ids found in no table are `other`."""
    for tag, members in tables:
        if audit_id in members:
            return tag
    return FALLBACK_CATEGORY
