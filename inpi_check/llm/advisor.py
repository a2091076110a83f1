"""Plain-language legal advice for availability responses."""

from inpi_check.config import Settings
from inpi_check.llm.base import BaseLLMProvider
from inpi_check.llm.factory import get_provider
from inpi_check.service import AvailabilityResponse


class LegalAdvisor:
    """Explains an availability verdict in plain Portuguese.

    The advice is prose only; it never changes the verdict.
    """

    def __init__(self, settings: Settings, provider: BaseLLMProvider | None = None):
        """Initialize advisor.

        Args:
            settings: Configuration settings
            provider: Optional pre-configured provider. If None, creates from settings.
        """
        self.provider = provider if provider is not None else get_provider(settings.llm)

    def _build_user_prompt(self, response: AvailabilityResponse) -> str:
        """Build the user prompt for one response."""
        verdict = "DISPONÍVEL" if response.available else "INDISPONÍVEL"

        records = []
        for item in response.evidence:
            records.append(
                "    <processo>"
                f"<numero>{item['number']}</numero>"
                f"<marca>{item['name']}</marca>"
                f"<situacao>{item['legal_status']}</situacao>"
                f"<titular>{item['holder']}</titular>"
                f"<classe>{item['nice_class']}</classe>"
                "</processo>"
            )
        records_xml = "\n".join(records) if records else "    (nenhum)"

        return f"""<consulta>
  <marca>{response.query}</marca>
  <decisao>{verdict}</decisao>
  <motivo>{response.verdict.message}</motivo>
  <processos>
{records_xml}
  </processos>
</consulta>

<tarefa>
Explique o resultado acima para o titular interessado, seguindo as regras do prompt de sistema.
</tarefa>"""

    def advise(self, response: AvailabilityResponse) -> str:
        """Generate advice text for a response.

        Args:
            response: Availability response to explain

        Returns:
            Advice text
        """
        return self.provider.generate(self._build_user_prompt(response)).strip()

    def is_available(self) -> bool:
        """Check if the provider is available."""
        return self.provider.is_available()

    @property
    def provider_name(self) -> str:
        return self.provider.name
