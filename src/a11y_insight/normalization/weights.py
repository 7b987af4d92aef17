"""Check severity weights and the read-through weight cache.

Weights follow Lighthouse accessibility scoring tiers:

    10  Critical   (WCAG A violations)
     7  Important  (WCAG AA, high impact)
     5  Moderate   (best practices)
     3  Minor      (low impact, informational)

Checks missing from the table resolve to ``DEFAULT_WEIGHT``.
"""

from __future__ import annotations

from typing import Mapping, Optional

from ..exceptions import InvalidConfigError

MIN_WEIGHT = 1
MAX_WEIGHT = 10
DEFAULT_WEIGHT = 5

WEIGHTS: dict[str, int] = {
    # ── HTML ──────────────────────────────────────────────────────────
    "buttonNames": 10,
    "imageAlt": 10,
    "inputImageAlt": 10,
    "formLabels": 10,
    "ariaRoles": 10,
    "ariaAttributes": 10,
    "ariaHiddenBody": 10,
    "duplicateIdAria": 10,
    "metaRefresh": 10,
    "metaViewport": 10,
    "videoCaptions": 10,
    "tableHeaders": 10,
    "blinkElement": 10,
    "marqueeElement": 10,
    "accesskeyUnique": 7,
    "linkNames": 7,
    "htmlHasLang": 7,
    "iframeTitles": 7,
    "listStructure": 7,
    "dlStructure": 7,
    "tabindex": 7,
    "objectAlt": 7,
    "emptyTableHeader": 7,
    "uniqueIds": 7,
    "formFieldName": 7,
    "scopeAttrMisuse": 7,
    "autoplayMedia": 7,
    "autofocusUsage": 5,
    "headingOrder": 3,
    "skipLink": 3,
    # ── Angular Material ──────────────────────────────────────────────
    "matFormFieldLabel": 10,
    "matSelectPlaceholder": 10,
    "matCheckboxLabel": 10,
    "matRadioGroupLabel": 10,
    "matSliderLabel": 10,
    "matSlideToggleLabel": 10,
    "matAutocompleteLabel": 10,
    "matDatepickerLabel": 10,
    "matChipListLabel": 10,
    "matIconAccessibility": 7,
    "matButtonType": 7,
    "matProgressSpinnerLabel": 7,
    "matProgressBarLabel": 7,
    "matTooltipKeyboard": 7,
    "matDialogFocus": 7,
    "matExpansionHeader": 7,
    "matTabLabel": 7,
    "matStepLabel": 7,
    "matMenuTrigger": 7,
    "matTableHeaders": 7,
    "matPaginatorLabel": 7,
    "matSidenavA11y": 7,
    "matTreeA11y": 7,
    "matBadgeDescription": 7,
    "matButtonToggleLabel": 7,
    "matListSelectionLabel": 7,
    "matSortHeaderAnnounce": 7,
    "matBottomSheetA11y": 5,
    "matSnackbarPoliteness": 5,
    # ── Angular ───────────────────────────────────────────────────────
    "clickWithoutKeyboard": 7,
    "clickWithoutRole": 7,
    "routerLinkNames": 7,
    "asyncPipeAria": 5,
    "ngForTrackBy": 3,
    "innerHtmlUsage": 3,
    # ── CDK ───────────────────────────────────────────────────────────
    "cdkTrapFocusDialog": 7,
    "cdkLiveAnnouncer": 5,
    "cdkAriaDescriber": 5,
    # ── SCSS ──────────────────────────────────────────────────────────
    "colorContrast": 7,
    "focusStyles": 7,
    "outlineNoneWithoutAlt": 7,
    "hoverWithoutFocus": 7,
    "touchTargets": 5,
    "prefersReducedMotion": 5,
    "pointerEventsNone": 5,
    "smallFontSize": 3,
    "lineHeightTight": 3,
    "contentOverflow": 3,
    "userSelectNone": 3,
    "focusWithinSupport": 3,
    "textJustify": 3,
    "visibilityHiddenUsage": 3,
}


def validate_weight(key: str, value: object) -> int:
    """Return ``value`` as a weight or raise ``InvalidConfigError``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigError(key, value, "weight must be an integer")
    if not MIN_WEIGHT <= value <= MAX_WEIGHT:
        raise InvalidConfigError(key, value, f"weight must be between {MIN_WEIGHT} and {MAX_WEIGHT}")
    return value


class WeightCache:
    """Memoized check name -> severity weight lookup.

    Built once at startup and passed by reference to the ranking and
    assembly code. Entries are computed from a static table, so two
    threads racing on the same first lookup store the same value and no
    lock is needed. Entries are never invalidated.
    """

    def __init__(
        self,
        table: Optional[Mapping[str, int]] = None,
        default: int = DEFAULT_WEIGHT,
    ):
        source = WEIGHTS if table is None else table
        self._table = {name: validate_weight(name, w) for name, w in source.items()}
        self.default = validate_weight("default_weight", default)
        self._cache: dict[str, int] = {}

    @classmethod
    def with_overrides(
        cls, overrides: Optional[Mapping[str, int]] = None, default: int = DEFAULT_WEIGHT
    ) -> WeightCache:
        """Built-in table with per-check overrides layered on top."""
        table = dict(WEIGHTS)
        table.update(overrides or {})
        return cls(table, default=default)

    def get(self, check: str) -> int:
        weight = self._cache.get(check)
        if weight is None:
            weight = self._table.get(check, self.default)
            self._cache[check] = weight
        return weight

    __getitem__ = get

    def known(self, check: str) -> bool:
        return check in self._table

    def table(self) -> dict[str, int]:
        """Copy of the configured table (not the memoized lookups)."""
        return dict(self._table)

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, check: object) -> bool:
        return check in self._cache
