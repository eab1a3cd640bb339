from schatkamer.run_data import FlyoutData
from schatkamer.rules_result import RulesResult
from schatkamer.rules.base_rules import BaseRules

# Limity sekcji flyoutu według obecnego UI
MAX_MEDIA = 5
MAX_OMROEP = 2
MAX_PERSONEN = 5


# ── Flyout wyszukiwarki ───────────────────────────────────────────────────────

class FlyoutRules(BaseRules):
    def check(self, data: FlyoutData) -> RulesResult:
        alerts = []

        if data.media_count > MAX_MEDIA:
            alerts.append(self.alert(
                'FLYOUT_MEDIA_LIMIT',
                f'Media: {data.media_count} wyników, maks. {MAX_MEDIA}',
            ))

        if data.omroep_count > MAX_OMROEP:
            alerts.append(self.alert(
                'FLYOUT_OMROEP_LIMIT',
                f'Omroep: {data.omroep_count} wyników, maks. {MAX_OMROEP}',
            ))

        if data.personen_count > MAX_PERSONEN:
            alerts.append(self.alert(
                'FLYOUT_PERSONEN_LIMIT',
                f'Personen: {data.personen_count} wyników, maks. {MAX_PERSONEN}',
            ))

        return self.ok(alerts=alerts)


class FlyoutOpenedRules(BaseRules):
    """Flyout musi się pokazać po pierwszym znaku — dowolna sekcja wystarczy."""

    def check(self, data: FlyoutData) -> RulesResult:
        if not data.opened:
            return self.ok(alerts=[self.alert(
                'FLYOUT_NOT_OPENED',
                'Brak sekcji Media/Personen i linku "Zoeken op" po wpisaniu znaku',
            )])
        return self.ok()
