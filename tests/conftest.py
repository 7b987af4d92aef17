"""Shared analyzer-output fixtures for a11y-insight tests."""

import logging

import pytest

from a11y_insight.normalization import WeightCache


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers commands attach so log files are closed between tests."""
    yield
    logger = logging.getLogger("a11y_insight")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def _issue(check, message, file, line):
    return {"check": check, "message": message, "file": file, "line": line}


@pytest.fixture
def weights():
    """Built-in weight table."""
    return WeightCache()


@pytest.fixture
def sitemap_result():
    """Sitemap audit: five URLs with a supplied distribution and internal routes."""
    return {
        "tier": "material",
        "sitemapPath": "public/sitemap.xml",
        "urlCount": 5,
        "distribution": {"passing": 2, "warning": 2, "failing": 1},
        "urls": [
            {
                "url": "https://example.com/",
                "path": "/",
                "auditScore": 45,
                "auditsTotal": 10,
                "auditsPassed": 4,
                "issues": [
                    _issue("imageAlt", "[Error] Image missing alt attribute", "src/app/home/home.component.html", 15),
                    _issue("imageAlt", "[Error] Image missing alt attribute", "src/app/home/home.component.html", 23),
                    _issue("buttonNames", "[Error] Button has no accessible name", "src/app/home/home.component.html", 42),
                    _issue("colorContrast", "[Warning] Color contrast ratio is 3.5:1", "src/app/home/home.component.scss", 28),
                    _issue("matIconAccessibility", "[Error] mat-icon missing aria-label", "src/app/home/home.component.html", 67),
                ],
            },
            {
                "url": "https://example.com/about",
                "path": "/about",
                "auditScore": 72,
                "auditsTotal": 8,
                "auditsPassed": 6,
                "issues": [
                    _issue("headingOrder", "[Warning] Heading levels should increase by one", "src/app/about/about.component.html", 12),
                    _issue("linkNames", "[Error] Link has no accessible name", "src/app/about/about.component.html", 45),
                ],
            },
            {
                "url": "https://example.com/contact",
                "path": "/contact",
                "auditScore": 65,
                "auditsTotal": 10,
                "auditsPassed": 6,
                "issues": [
                    _issue("formLabels", "[Error] Form input missing associated label", "src/app/contact/contact.component.html", 18),
                    _issue("formLabels", "[Error] Form input missing associated label", "src/app/contact/contact.component.html", 24),
                    _issue("matFormFieldLabel", "[Error] mat-form-field missing mat-label", "src/app/contact/contact.component.html", 30),
                ],
            },
            {"url": "https://example.com/products", "path": "/products", "auditScore": 95, "auditsTotal": 12, "auditsPassed": 12, "issues": []},
            {"url": "https://example.com/blog", "path": "/blog", "auditScore": 92, "auditsTotal": 8, "auditsPassed": 8, "issues": []},
        ],
        "internal": {
            "count": 1,
            "routes": [
                {
                    "path": "/admin",
                    "auditScore": 40,
                    "issues": [_issue("buttonNames", "[Error] Button missing name", "src/app/admin/admin.component.html", 10)],
                }
            ],
        },
    }


@pytest.fixture
def route_result():
    """Route audit with a supplied distribution."""
    return {
        "tier": "full",
        "routeCount": 3,
        "distribution": {"passing": 1, "warning": 1, "failing": 1},
        "routes": [
            {
                "path": "/dashboard",
                "auditScore": 30,
                "auditsPassed": 3,
                "auditsTotal": 10,
                "issues": [
                    _issue("matFormFieldLabel", "[Error] mat-form-field missing mat-label", "src/app/dashboard/dashboard.component.html", 8),
                    _issue("clickWithoutKeyboard", "[Error] (click) without keyboard handler", "src/app/dashboard/dashboard.component.html", 19),
                ],
            },
            {
                "path": "/settings",
                "auditScore": 80,
                "auditsPassed": 8,
                "auditsTotal": 10,
                "issues": [_issue("headingOrder", "[Warning] Skipped heading level", "src/app/settings/settings.component.html", 3)],
            },
            {"path": "/help", "auditScore": 100, "auditsPassed": 5, "auditsTotal": 5, "issues": []},
        ],
    }


@pytest.fixture
def component_result():
    """Component scan listing only defective components."""
    return {
        "tier": "material",
        "totalComponentsScanned": 12,
        "componentCount": 3,
        "totalIssues": 6,
        "components": [
            {
                "name": "HeaderComponent",
                "auditScore": 40,
                "affected": ["/", "/about", "/contact"],
                "issues": [
                    _issue("matIconAccessibility", "[Error] mat-icon missing aria-label", "src/app/header/header.component.html", 4),
                    _issue("buttonNames", "[Error] Button has no accessible name", "src/app/header/header.component.html", 9),
                ],
            },
            {
                "name": "CheckoutFormComponent",
                "checkAggregates": {
                    "formLabels": {"elementsFound": 6, "issues": 3, "errors": 3, "warnings": 0},
                    "buttonNames": {"elementsFound": 2, "issues": 0, "errors": 0, "warnings": 0},
                    "imageAlt": {"elementsFound": 0, "issues": 0, "errors": 0, "warnings": 0},
                },
                "issues": [
                    _issue("formLabels", "[Error] Input missing label", "src/app/checkout/checkout-form.component.html", 11),
                    _issue("formLabels", "[Error] Input missing label", "src/app/checkout/checkout-form.component.html", 17),
                    _issue("formLabels", "[Error] Input missing label", "src/app/checkout/checkout-form.component.html", 25),
                ],
            },
            {
                "name": "FooterComponent",
                "affectedUrls": ["/", "/about", "/"],
                "issues": [_issue("linkNames", "[Error] Link has no accessible name", "src/app/footer/footer.component.html", 30)],
            },
        ],
    }


@pytest.fixture
def file_result():
    """Legacy file-based scan aggregated under one summary."""
    return {
        "tier": "basic",
        "files": {"src/app/app.component.html": [], "src/app/home/home.component.html": []},
        "summary": {
            "totalFiles": 2,
            "auditScore": 70,
            "auditsTotal": 4,
            "auditsPassed": 2,
            "issues": [
                {"message": "[Error] Button missing name at line 10", "file": "src/app/app.component.html", "check": "buttonNames"},
                {"message": "[Error] Image missing alt at line 15", "file": "src/app/home/home.component.html", "check": "imageAlt"},
                {"message": "[Error] Image missing alt at line 22", "file": "src/app/home/home.component.html", "check": "imageAlt"},
            ],
        },
    }


@pytest.fixture
def missing_fields_result():
    """Sitemap audit with no distribution and partially populated pages."""
    return {
        "tier": "material",
        "urlCount": 2,
        "urls": [
            {
                "url": "https://example.com/",
                "path": "/",
                "component": None,
                "auditScore": 60,
                "issues": [{"check": "buttonNames", "message": "[Error] Button missing name"}],
            },
            {
                "url": "https://example.com/unresolved",
                "path": "/unresolved",
                "issues": [],
                "error": "Could not resolve component for route",
            },
        ],
    }


@pytest.fixture
def all_results(sitemap_result, route_result, component_result, file_result, missing_fields_result):
    return [sitemap_result, route_result, component_result, file_result, missing_fields_result]
