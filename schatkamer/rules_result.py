from dataclasses import dataclass, field


@dataclass
class AlertResult:
    business_rule: str
    description: str = ""
    alert_type: str = "bug"


@dataclass
class RulesResult:
    alerts: list[AlertResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.alerts

    def codes(self) -> list[str]:
        return [a.business_rule for a in self.alerts]

    def summary(self) -> str:
        # Czytelny komunikat do assert, jedna linia na alert
        return "\n".join(f"{a.business_rule}: {a.description}" for a in self.alerts)
