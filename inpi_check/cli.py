"""Interface de linha de comando para consulta de disponibilidade de marcas."""

import csv
import json
import logging
import sys
from pathlib import Path

import anthropic
import click
import httpx
import openai
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from inpi_check.availability import StatusCategory
from inpi_check.broker import (
    BrokerError,
    ConfigurationMissingError,
    UpstreamRejectedError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from inpi_check.config import Settings, load_settings
from inpi_check.llm import LegalAdvisor, check_provider_availability, list_providers
from inpi_check.service import (
    AvailabilityResponse,
    create_decider_from_settings,
    create_service_from_settings,
)

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    ConfigurationMissingError: "Token Infosimples não configurado.",
    UpstreamUnavailableError: "⚠️ INPI fora do ar. Tente novamente em alguns minutos.",
    UpstreamRejectedError: "Erro na comunicação com o INPI.",
    UpstreamTimeoutError: "⏱️ Tempo de resposta excedido.",
}

CATEGORY_LABELS = {
    StatusCategory.TERMINAL: "[green]terminal[/green]",
    StatusCategory.BLOCKING: "[red]bloqueante[/red]",
    StatusCategory.UNKNOWN: "[yellow]desconhecida (bloqueante)[/yellow]",
}

# Errors a provider may raise while generating advice
ADVICE_ERRORS = (
    anthropic.APIError,
    openai.OpenAIError,
    httpx.HTTPError,
    FileNotFoundError,
)


def configure_logging(level: str) -> None:
    """Route log records through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def fail_with_broker_error(error: BrokerError) -> None:
    """Print a broker error and exit with status 1."""
    message = ERROR_MESSAGES.get(type(error), "❌ Erro interno ao processar a consulta.")
    console.print(f"[red]{message}[/red]")
    console.print(f"[dim]{error.category}: {error.message}[/dim]")
    sys.exit(1)


def generate_advice(settings: Settings, response: AvailabilityResponse) -> tuple[str | None, str | None]:
    """Ask the configured LLM to explain a response.

    Returns:
        Tuple of (advice, warning); exactly one of them is set
    """
    try:
        advisor = LegalAdvisor(settings)
    except ValueError as e:
        return None, f"Parecer ignorado: {e}"

    if not advisor.is_available():
        return None, f"Provedor '{advisor.provider_name}' não configurado, parecer ignorado."

    try:
        return advisor.advise(response), None
    except ADVICE_ERRORS as e:
        logger.debug("Advice generation failed", exc_info=True)
        return None, f"Falha ao gerar parecer com '{advisor.provider_name}': {e}"


def print_response(response: AvailabilityResponse) -> None:
    """Render one availability response."""
    verdict = response.verdict
    color = "green" if verdict.available else "red"
    label = "🟢 DISPONÍVEL" if verdict.available else "🔴 INDISPONÍVEL"

    console.print(Panel(
        f"[bold][{color}]{label}[/{color}][/bold]\n{verdict.message}",
        title=f"Marca – {response.query}",
    ))

    if response.evidence:
        table = Table(title="Processos relevantes")
        table.add_column("Processo")
        table.add_column("Marca", style="cyan")
        table.add_column("Situação")
        table.add_column("Titular")
        table.add_column("Classe")

        for item in response.evidence[:15]:
            table.add_row(
                item["number"] or "-",
                item["name"],
                item["legal_status"] or "-",
                item["holder"] or "-",
                item["nice_class"] or "-",
            )

        console.print(table)

        if len(response.evidence) > 15:
            console.print(f"[dim]... e mais {len(response.evidence) - 15} processos[/dim]")
    elif verdict.blocking_categories:
        categories = ", ".join(CATEGORY_LABELS[c] for c in verdict.blocking_categories)
        console.print(f"[bold]Situações bloqueantes:[/bold] {categories}")

    meta = response.metadata
    console.print(
        f"[dim]Fonte: {meta.source} · busca {meta.search_type} · "
        f"{meta.pages} página(s) · {meta.elapsed_ms} ms[/dim]"
    )


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    help="Caminho do arquivo de configuração (padrão: config.yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Mostrar logs detalhados")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """Consulta de disponibilidade de marcas no INPI.

    Busca os processos da marca via Infosimples e decide se ela pode ser
    registrada: qualquer processo correspondente em situação não terminal
    bloqueia o registro.
    """
    ctx.ensure_object(dict)
    settings = load_settings(config)
    ctx.obj["settings"] = settings
    configure_logging("DEBUG" if verbose else settings.logging.level)


@cli.command("consulta")
@click.argument("marca")
@click.option("--exata", is_flag=True, help="Aceitar apenas correspondência exata do nome")
@click.option("--json", "as_json", is_flag=True, help="Imprimir a resposta em JSON")
@click.option("--parecer", is_flag=True, help="Gerar parecer em linguagem natural com LLM")
@click.pass_context
def check_mark(ctx: click.Context, marca: str, exata: bool, as_json: bool, parecer: bool) -> None:
    """Verifique se uma marca está disponível para registro.

    Sem token Infosimples usa um registro simulado (mock).

    Exemplos:
        inpi-check consulta "Túnel Crew"
        inpi-check consulta ACME --exata --json
    """
    settings = ctx.obj["settings"]

    if not marca.strip():
        raise click.BadParameter("O nome da marca é obrigatório.", param_hint="MARCA")

    service = create_service_from_settings(settings, match_policy="exact" if exata else None)

    if service.is_using_mock and not as_json:
        console.print("[yellow]⚠ Usando registro simulado (INFOSIMPLES_TOKEN não configurado)[/yellow]")

    try:
        if as_json:
            response = service.check(marca)
        else:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
            ) as progress:
                progress.add_task("Consultando o INPI...", total=None)
                response = service.check(marca)
    except BrokerError as e:
        fail_with_broker_error(e)
        return

    advice = warning = None
    if parecer:
        advice, warning = generate_advice(settings, response)

    if as_json:
        data = response.to_dict()
        if parecer:
            data["advice"] = advice
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
        if warning:
            err_console.print(f"[yellow]{warning}[/yellow]")
        return

    print_response(response)
    if advice:
        console.print(Panel(advice, title="Parecer"))
    elif warning:
        console.print(f"[yellow]{warning}[/yellow]")


@cli.command("lote")
@click.argument("arquivo", type=click.Path(exists=True))
@click.option("--exata", is_flag=True, help="Aceitar apenas correspondência exata do nome")
@click.option("--saida", "-o", type=click.Path(), default=None, help="Arquivo CSV de saída")
@click.pass_context
def check_batch(ctx: click.Context, arquivo: str, exata: bool, saida: str | None) -> None:
    """Verifique várias marcas lidas de um arquivo (uma por linha).

    Exemplos:
        inpi-check lote marcas.txt
        inpi-check lote marcas.txt --saida resultado.csv
    """
    settings = ctx.obj["settings"]

    with open(arquivo, encoding="utf-8") as f:
        names = [line.strip() for line in f if line.strip()]

    if not names:
        console.print("[red]O arquivo não contém nenhuma marca.[/red]")
        return

    service = create_service_from_settings(settings, match_policy="exact" if exata else None)

    if service.is_using_mock:
        console.print("[yellow]⚠ Usando registro simulado (INFOSIMPLES_TOKEN não configurado)[/yellow]")

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task("Consultando marcas...", total=len(names))
            responses = service.check_batch(
                names,
                progress_callback=lambda name, i, total: progress.update(
                    task, completed=i - 1, description=f"Consultando: {name}"
                ),
            )
            progress.update(task, completed=len(names))
    except BrokerError as e:
        fail_with_broker_error(e)
        return

    table = Table(title="Resultado da consulta")
    table.add_column("Marca", style="cyan")
    table.add_column("Disponível", justify="center")
    table.add_column("Motivo")
    table.add_column("Processos", justify="right")

    for r in responses:
        table.add_row(
            r.query,
            "[green]sim[/green]" if r.available else "[red]não[/red]",
            r.verdict.message,
            str(len(r.verdict.matched_records)),
        )

    console.print(table)

    available_count = sum(1 for r in responses if r.available)
    console.print(f"\n[bold]Disponíveis:[/bold] {available_count} de {len(responses)}")

    if saida:
        with open(saida, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["query", "available", "reason", "matched", "blocking"])
            for r in responses:
                writer.writerow([
                    r.query,
                    r.available,
                    r.verdict.reason.value,
                    len(r.verdict.matched_records),
                    len(r.verdict.blocking_records),
                ])
        console.print(f"[green]Resultado salvo em: {saida}[/green]")


@cli.command("situacao")
@click.argument("situacoes", nargs=-1, required=True)
@click.pass_context
def classify_status(ctx: click.Context, situacoes: tuple[str, ...]) -> None:
    """Classifique situações processuais com a tabela configurada.

    Exemplo:
        inpi-check situacao "Arquivado definitivamente" "Alto Renome"
    """
    table_config = create_decider_from_settings(ctx.obj["settings"]).table

    table = Table(title=f"Tabela de situações v{table_config.version}")
    table.add_column("Situação")
    table.add_column("Categoria")
    table.add_column("Bloqueia", justify="center")

    for status in situacoes:
        category = table_config.classify(status)
        table.add_row(status, CATEGORY_LABELS[category], "sim" if category.blocks else "não")

    console.print(table)


@cli.command("conexao")
@click.pass_context
def test_connection(ctx: click.Context) -> None:
    """Teste a conexão com o Infosimples e o provedor de LLM."""
    settings = ctx.obj["settings"]
    service = create_service_from_settings(settings)

    ok, message = service.test_connection()
    color = "green" if ok else "red"
    console.print(f"[bold]Infosimples:[/bold] [{color}]{message}[/{color}]")

    ok, message = check_provider_availability(settings.llm)
    color = "green" if ok else "yellow"
    console.print(f"[bold]LLM:[/bold] [{color}]{message}[/{color}]")
    console.print(f"[dim]Provedores suportados: {', '.join(list_providers())}[/dim]")


def main() -> None:
    """Entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
