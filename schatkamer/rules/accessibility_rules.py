import re

from schatkamer.run_data import A11yData
from schatkamer.rules_result import RulesResult
from schatkamer.rules.base_rules import BaseRules

MIN_NAMED_LINKS_RATIO = 0.7
MIN_IMAGE_ALT_RATIO = 0.5
# WCAG 2.2 AA wymaga 24x24, tolerancja na zaokrąglenia layoutu
MIN_TARGET_SIZE = 20
REFLOW_TOLERANCE = 20
PAGE_LANG = re.compile(r'^(nl|en)')


# ── WCAG — próbki z jednej strony ─────────────────────────────────────────────

class AccessibilityRules(BaseRules):
    def check(self, data: A11yData) -> RulesResult:
        alerts = []

        # 2.4.4 Link Purpose
        if data.links is not None:
            named = sum(1 for link in data.links if link.accessible_name)
            if not data.links:
                alerts.append(self.alert('A11Y_NO_LINKS', 'Brak linków na stronie'))
            elif named <= len(data.links) * MIN_NAMED_LINKS_RATIO:
                alerts.append(self.alert(
                    'A11Y_LINK_NAMES',
                    f'Linki z nazwą: {named}/{len(data.links)}',
                ))

        # 1.1.1 Non-text Content
        if data.image_alts is not None:
            with_alt = sum(1 for alt in data.image_alts if alt is not None)
            if not data.image_alts:
                alerts.append(self.alert('A11Y_NO_IMAGES', 'Brak obrazków na stronie'))
            elif with_alt <= len(data.image_alts) * MIN_IMAGE_ALT_RATIO:
                alerts.append(self.alert(
                    'A11Y_IMAGE_ALT',
                    f'Obrazki z alt: {with_alt}/{len(data.image_alts)}',
                ))

        # 2.5.8 Target Size, niewidoczne przyciski (box None) pomijamy
        if data.button_boxes is not None:
            for i, box in enumerate(data.button_boxes):
                if box is None:
                    continue
                if box['width'] < MIN_TARGET_SIZE or box['height'] < MIN_TARGET_SIZE:
                    alerts.append(self.alert(
                        'A11Y_TARGET_SIZE',
                        f"Przycisk #{i}: {box['width']:.0f}x{box['height']:.0f}px",
                    ))

        # 2.1.2 No Keyboard Trap
        if data.focused_tags is not None and len(set(data.focused_tags)) <= 1:
            alerts.append(self.alert(
                'A11Y_KEYBOARD_TRAP',
                f'Fokus nie przesuwa się: {data.focused_tags}',
            ))

        if data.h1_count is not None and data.h1_count != 1:
            alerts.append(self.alert('A11Y_H1_COUNT', f'Liczba H1: {data.h1_count}'))

        # 1.4.10 Reflow
        if data.body_scroll_width is not None and data.viewport_width is not None:
            if data.body_scroll_width > data.viewport_width + REFLOW_TOLERANCE:
                alerts.append(self.alert(
                    'A11Y_REFLOW',
                    f'scrollWidth {data.body_scroll_width} > viewport {data.viewport_width}',
                ))

        # 3.1.1 Language of Page
        if data.lang is not None and not PAGE_LANG.match(data.lang.lower()):
            alerts.append(self.alert('A11Y_PAGE_LANG', f'lang={data.lang!r}'))

        return self.ok(alerts=alerts)
