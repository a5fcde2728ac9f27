from pathlib import Path
from typing import Optional, Sequence

import pandas as pd
import typer
from InquirerPy import inquirer

from src.datahub import ALL_CHOICE, APPRAISALS, EMOTIONS, FilterRequest, StudyObservation, load_observations
from src.datahub.config import DEFAULT_DATA_PATH
from src.metrics.aggregation import MetaAnalysisConfig
from src.metrics.pcurve import PCurveResult, StoufferResult, run_pcurve
from src.pipelines import build_results, prepare_batch, results_to_frame, select_batches, write_results

app = typer.Typer()

DATA_OPTION = typer.Option(
    DEFAULT_DATA_PATH,
    "--data",
    exists=False,
    file_okay=True,
    dir_okay=False,
    help="CSV with coded appraisal-emotion correlations.",
)


def _print_frame(frame: pd.DataFrame) -> None:
    if frame.empty:
        print("No appraisal-emotion pairs match the current filters.")
        return
    with pd.option_context("display.max_rows", None, "display.max_columns", None, "display.width", 200):
        print(frame.to_string(index=False, float_format=lambda value: f"{value:.3f}", na_rep=""))


def _run(
    observations: Sequence[StudyObservation],
    request: FilterRequest,
    config: MetaAnalysisConfig,
    output: Optional[Path] = None,
) -> None:
    results = build_results(observations, request, config)
    frame = results_to_frame(results, request)
    _print_frame(frame)
    if output:
        write_results(frame, output)


@app.command()
def analyze(
    data: Path = DATA_OPTION,
    emotion: str = typer.Option(ALL_CHOICE, "--emotion", help="Emotion to keep, or 'all'."),
    appraisal: str = typer.Option(ALL_CHOICE, "--appraisal", help="Appraisal cluster to keep, or 'all'."),
    publication_bias: bool = typer.Option(
        False,
        "--publication-bias",
        help="Add Egger's test (k > 10) and p-curve statistics.",
    ),
    interpretation: bool = typer.Option(False, "--interpretation", help="Add a plain-language summary per pair."),
    method: str = typer.Option("random", "--method", help="Pooling model: random or fixed."),
    output: Optional[Path] = typer.Option(None, "--output", help="Optional CSV path for the result table."),
) -> None:
    """
    Pool every selected appraisal-emotion pair and print the result table.
    """
    try:
        request = FilterRequest.from_flags(
            emotion=emotion,
            appraisal=appraisal,
            publication_bias=publication_bias,
            interpretation=interpretation,
        )
        config = MetaAnalysisConfig(method=method)  # type: ignore[arg-type]
        config.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    _run(load_observations(data), request, config, output)


def _format_test(name: str, result: StoufferResult) -> str:
    if not result.defined:
        return f"{name:<22} z = {'':>8}  p = {'':>8}  (no qualifying studies)"
    return f"{name:<22} z = {result.z:>8.3f}  p = {result.p:>8.4f}  (k = {result.k})"


def _print_pcurve(appraisal: str, emotion: str, result: PCurveResult) -> None:
    print(f"{appraisal} × {emotion}: ksig = {result.ksig}, khalf = {result.khalf}")
    print(_format_test("Full right-skew", result.full))
    print(_format_test("Full 33% power", result.full33))
    print(_format_test("Half right-skew", result.half))
    print(_format_test("Half 33% power", result.half33))


@app.command()
def pcurve(
    emotion: str = typer.Option(..., "--emotion", help="Emotion of the pair."),
    appraisal: str = typer.Option(..., "--appraisal", help="Appraisal cluster of the pair."),
    data: Path = DATA_OPTION,
):
    """Print the full and half p-curve tests for one appraisal-emotion pair."""
    try:
        request = FilterRequest.from_flags(emotion=emotion, appraisal=appraisal)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if ALL_CHOICE in (request.emotion, request.appraisal):
        raise typer.BadParameter("p-curve needs one specific emotion and one specific appraisal.")

    plan = select_batches(load_observations(data), request)
    if not plan.keys:
        print(f"No studies coded for {request.appraisal} × {request.emotion}.")
        raise typer.Exit(code=1)
    key = plan.keys[0]
    _print_pcurve(key[0], key[1], run_pcurve(prepare_batch(plan.members[key])))


@app.command()
def explore(
    data: Path = DATA_OPTION,
    method: str = typer.Option("random", "--method", help="Pooling model: random or fixed."),
):
    """Pick filters interactively; every change re-runs the analysis."""
    config = MetaAnalysisConfig(method=method)  # type: ignore[arg-type]
    try:
        config.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    observations = load_observations(data)
    request = FilterRequest()
    while True:
        _run(observations, request, config)
        action = inquirer.select(
            message="Change a filter",
            choices=["emotion", "appraisal", "publication bias", "interpretation", "quit"],
        ).execute()
        if action == "quit":
            break
        if action == "emotion":
            emotion = inquirer.fuzzy(message="Emotion", choices=[ALL_CHOICE, *EMOTIONS]).execute()
            request = FilterRequest.from_flags(emotion, request.appraisal, request.publication_bias, request.interpretation)
        elif action == "appraisal":
            appraisal = inquirer.fuzzy(message="Appraisal", choices=[ALL_CHOICE, *APPRAISALS]).execute()
            request = FilterRequest.from_flags(request.emotion, appraisal, request.publication_bias, request.interpretation)
        elif action == "publication bias":
            flag = inquirer.confirm(message="Show publication bias?", default=not request.publication_bias).execute()
            request = FilterRequest.from_flags(request.emotion, request.appraisal, flag, request.interpretation)
        elif action == "interpretation":
            flag = inquirer.confirm(message="Show interpretation?", default=not request.interpretation).execute()
            request = FilterRequest.from_flags(request.emotion, request.appraisal, request.publication_bias, flag)


if __name__ == "__main__":
    app()
