from typing import Any

from prefect import flow, get_run_logger, task
from prefect.runtime import task_run

from vacuum.etl import LaunchETL
from vacuum.models import LaunchCollection
from vacuum.render import RenderMode


def launch_task_run_name(step_name: str):
    # e.g. "Launch extended - Render"
    def _name_run() -> str:
        etl: LaunchETL = task_run.get_parameters()["etl"]
        return f"{etl.name} {etl.mode.value} - {step_name}"

    return _name_run


@task(name="Extract", task_run_name=launch_task_run_name("Extract"))
def extract_task(etl: LaunchETL, url: str) -> dict[str, Any]:
    return etl.extract(url)


@task(name="Transform", task_run_name=launch_task_run_name("Transform"))
def transform_task(etl: LaunchETL, raw_data: dict[str, Any]) -> LaunchCollection:
    return etl.transform(raw_data)


@task(name="Render", task_run_name=launch_task_run_name("Render"))
def render_task(etl: LaunchETL, launches: LaunchCollection) -> list[str]:
    return etl.render(launches)


@flow(name="Upcoming Launches")
def launch_pipeline(number: int = 1, mode: RenderMode = RenderMode.COMPACT) -> list[str]:
    logger = get_run_logger()
    etl = LaunchETL(mode=mode)

    raw_data = extract_task(etl, etl.url(number))
    launches = transform_task(etl, raw_data)
    rendered = render_task(etl, launches)

    logger.info("Rendered %d of %d upcoming launches", len(rendered), launches.total)
    for block in rendered:
        logger.info("\n%s", block)
    return rendered


if __name__ == "__main__":
    launch_pipeline()
