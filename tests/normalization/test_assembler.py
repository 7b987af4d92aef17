"""Tests for the normalized result across all analyzer shapes."""

import pytest

from a11y_insight.normalization import (
    Distribution,
    NormalizedResult,
    ResultNormalizer,
    WeightCache,
    normalize_results,
)

# JSON integer beyond float range
HUGE = 10**400


def _issue_total(result):
    return sum(len(e.issues) for e in result.entities)


class TestCommonShape:
    def test_invariants_hold_for_every_fixture(self, all_results):
        for raw in all_results:
            result = normalize_results(raw)
            assert isinstance(result, NormalizedResult)
            assert isinstance(result.tier, str) and result.tier
            assert result.total >= 0
            assert len(result.issues) == _issue_total(result)
            assert all(0 <= e.audit_score <= 100 for e in result.entities)
            assert all(e.issue_points is not None for e in result.entities)

            points = [e.issue_points.total_points for e in result.entities]
            assert points == sorted(points, reverse=True)
            weights = [i.weight for i in result.issues]
            assert weights == sorted(weights, reverse=True)

    def test_flat_issues_are_tagged(self, sitemap_result):
        result = normalize_results(sitemap_result)
        for issue in result.issues:
            assert isinstance(issue.entity, str)
            assert isinstance(issue.audit_score, int)
            assert 1 <= issue.weight <= 10

    def test_entity_issues_carry_no_weight(self, sitemap_result):
        result = normalize_results(sitemap_result)
        assert all(i.weight is None for e in result.entities for i in e.issues)


class TestSitemap:
    def test_normalized(self, sitemap_result):
        result = normalize_results(sitemap_result)
        assert result.tier == "material"
        assert result.total == 5
        assert result.distribution == Distribution(passing=2, warning=2, failing=1)
        assert len(result.entities) == 5
        assert len(result.issues) == 10

    def test_entities_by_points(self, sitemap_result):
        result = normalize_results(sitemap_result)
        assert [e.label for e in result.entities] == ["/", "/contact", "/about", "/products", "/blog"]
        assert [e.issue_points.total_points for e in result.entities] == [44, 30, 10, 0, 0]

    def test_issue_owner_score(self, sitemap_result):
        result = normalize_results(sitemap_result)
        heading = next(i for i in result.issues if i.check == "headingOrder")
        assert heading.entity == "/about"
        assert heading.audit_score == 72
        assert result.issues[-1] is heading


class TestRoutes:
    def test_normalized(self, route_result):
        result = normalize_results(route_result)
        assert result.tier == "full"
        assert result.total == 3
        assert result.distribution == Distribution(passing=1, warning=1, failing=1)
        assert [e.label for e in result.entities] == ["/dashboard", "/settings", "/help"]


class TestComponents:
    def test_normalized(self, component_result):
        result = normalize_results(component_result)
        assert result.total == 12
        assert result.distribution == Distribution(passing=9, warning=1, failing=2)
        assert result.distribution.total == result.total
        assert len(result.entities) == 3
        assert len(result.issues) == component_result["totalIssues"]

    def test_entities_by_points(self, component_result):
        result = normalize_results(component_result)
        summary = [(e.label, e.issue_points.total_points) for e in result.entities]
        assert summary == [
            ("HeaderComponent", 51),
            ("CheckoutFormComponent", 30),
            ("FooterComponent", 14),
        ]

    def test_flat_issue_order(self, component_result):
        result = normalize_results(component_result)
        assert [(i.check, i.entity) for i in result.issues] == [
            ("buttonNames", "HeaderComponent"),
            ("formLabels", "CheckoutFormComponent"),
            ("formLabels", "CheckoutFormComponent"),
            ("formLabels", "CheckoutFormComponent"),
            ("matIconAccessibility", "HeaderComponent"),
            ("linkNames", "FooterComponent"),
        ]

    def test_clean_by_omission(self):
        result = normalize_results(
            {"tier": "full", "componentCount": 0, "totalComponentsScanned": 5, "totalIssues": 0, "components": []}
        )
        assert result.total == 5
        assert result.distribution == Distribution(passing=5, warning=0, failing=0)
        assert result.issues == ()
        assert result.entities == ()

    def test_vacuous_aggregates_pass(self):
        result = normalize_results(
            {"components": [{"name": "Empty", "checkAggregates": {"imageAlt": {"elementsFound": 0}}}]}
        )
        assert result.entities[0].audit_score == 100


class TestFiles:
    def test_normalized(self, file_result):
        result = normalize_results(file_result)
        assert result.tier == "basic"
        assert result.total == 1
        assert len(result.entities) == 1
        assert result.entities[0].kind.value == "file"
        assert len(result.issues) == 3
        assert result.distribution == Distribution(warning=1)


class TestRobustness:
    def test_missing_distribution(self, missing_fields_result):
        result = normalize_results(missing_fields_result)
        assert result.distribution == Distribution(passing=1, warning=1, failing=0)
        assert result.total == 2

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            42,
            "text",
            [],
            {},
            {"tier": ""},
            {"urls": [None, 3, {"issues": "bad", "auditScore": None}]},
            {"routes": [{"path": "/", "issues": [None, "str", {"line": "x"}]}]},
            {"components": [{"affectedUrls": 7, "checkAggregates": "bad", "issues": [{}]}]},
            {"summary": {"issues": [], "auditScore": float("nan")}},
            {"components": [], "totalComponentsScanned": "many", "componentCount": None},
            {"urls": [{"path": "/", "auditScore": HUGE}]},
            {"routes": [{"path": "/"}], "routeCount": HUGE},
            {"components": [{"name": "Big", "checkAggregates": {"imageAlt": {"elementsFound": HUGE}}}]},
            {"components": [], "totalComponentsScanned": HUGE, "componentCount": HUGE},
        ],
    )
    def test_never_raises(self, raw):
        result = normalize_results(raw)
        assert isinstance(result.distribution.passing, int)
        assert len(result.issues) == _issue_total(result)

    def test_huge_integers_saturate(self):
        page = normalize_results({"urls": [{"path": "/", "auditScore": HUGE}], "urlCount": HUGE})
        assert page.entities[0].audit_score == 100
        assert page.total == HUGE

        routes = normalize_results({"routes": [{"path": "/", "auditScore": -HUGE}]})
        assert routes.entities[0].audit_score == 0

    def test_unknown_shape_is_empty(self):
        result = normalize_results({"tier": "full", "urlCount": 3, "distribution": {"passing": 3}})
        assert result == NormalizedResult(tier="full", total=0)

    def test_default_tier(self):
        assert normalize_results({}).tier == "material"
        assert ResultNormalizer(default_tier="basic").normalize({"tier": None}).tier == "basic"

    def test_input_not_mutated(self, component_result):
        import copy

        snapshot = copy.deepcopy(component_result)
        normalize_results(component_result)
        assert component_result == snapshot


class TestInjectedWeights:
    def test_overrides_change_order(self, route_result):
        weights = WeightCache.with_overrides({"headingOrder": 10, "matFormFieldLabel": 1, "clickWithoutKeyboard": 1})
        result = normalize_results(route_result, weights)
        # /dashboard: 1 + 1 = 2, /settings: 10
        assert [e.label for e in result.entities][:2] == ["/settings", "/dashboard"]
        assert result.issues[0].check == "headingOrder"

    def test_cache_shared_across_runs(self, sitemap_result, route_result):
        weights = WeightCache()
        normalizer = ResultNormalizer(weights)
        normalizer(sitemap_result)
        normalizer.normalize(route_result)
        assert "imageAlt" in weights
        assert "clickWithoutKeyboard" in weights


class TestToDict:
    def test_camel_case_contract(self, component_result):
        data = normalize_results(component_result).to_dict()
        assert set(data) == {"tier", "total", "distribution", "entities", "issues"}
        header = data["entities"][0]
        assert header["auditScore"] == 40
        assert header["issuePoints"] == {"basePoints": 17, "usageCount": 3, "totalPoints": 51}
        assert header["affected"] == ["/", "/about", "/contact"]
        assert "auditsPassed" not in header
        issue = data["issues"][0]
        assert issue["entity"] == "HeaderComponent"
        assert issue["auditScore"] == 40
        assert issue["weight"] == 10
