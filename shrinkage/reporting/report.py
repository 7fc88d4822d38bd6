from shrinkage.config import REPORT_DECIMALS, REPORT_TEMPLATE


def _fmt(value: float, decimals: int = REPORT_DECIMALS) -> str:
    return f"{value:.{decimals}f}"


def format_report(shrinkage: float, adjustment: float, simulated_adjustment: float) -> str:
    return REPORT_TEMPLATE.format(
        shrinkage=_fmt(shrinkage),
        adjustment=_fmt(adjustment),
        simulated_adjustment=_fmt(simulated_adjustment),
    )
