from schatkamer.context import SiteContext
from schatkamer.rules_result import AlertResult, RulesResult


class BaseRules:
    def __init__(self, context: SiteContext):
        self.context = context

    def check(self, data) -> RulesResult:
        raise NotImplementedError

    def alert(
        self,
        business_rule: str,
        description: str = "",
        alert_type: str = "bug",
    ) -> AlertResult:
        return AlertResult(
            business_rule=business_rule,
            description=description,
            alert_type=alert_type,
        )

    def ok(self, alerts: list[AlertResult] = None) -> RulesResult:
        """
        Wynik sprawdzenia.
          - brak alertów:  return self.ok()
          - z alertami:    return self.ok(alerts=alerts)
        Test oblewa gdy result.passed == False.
        """
        return RulesResult(alerts=alerts or [])
