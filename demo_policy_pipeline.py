import shutil
import sys
from pathlib import Path

from policylens.adapters.text_input import PolicyInputError
from policylens.explainability.view import CATEGORY_TITLES, group_checks_by_category
from policylens.orchestrator.pipeline import analyze_policy

SAMPLE_POLICY = """
Privacy Policy - Last updated 3 March 2024

Acme Ltd is the data controller for the personal data described here.
We explain the purpose of each processing activity and rely on your consent
or our legitimate interest. We share information with third parties such as
payment processors. You can exercise your rights at any time by email at
privacy@acme.example, or lodge a complaint with your supervisory authority.
"""


# --- AUDIT-STYLE UI THEME ---
class Colors:
    OKGREEN = '\033[92m'     # Pass
    WARNING = '\033[93m'     # Warn
    FAIL = '\033[91m'        # Fail

    HEADER = '\033[1m'
    MUTED = '\033[90m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

    BORDER = MUTED
    LABEL = ENDC
    VALUE = BOLD


STATUS_COLORS = {
    "pass": Colors.OKGREEN,
    "warn": Colors.WARNING,
    "fail": Colors.FAIL,
}

BAND_COLORS = {
    "good": Colors.OKGREEN,
    "medium": Colors.WARNING,
    "poor": Colors.FAIL,
}


def print_separator(char="-"):
    width = shutil.get_terminal_size().columns
    print(Colors.BORDER + (char * width) + Colors.ENDC)


def print_section(title):
    print("\n")
    print_separator("=")
    print(f"  {Colors.HEADER}{title.upper()}{Colors.ENDC}")
    print_separator("=")


def print_kv(key, value, color=Colors.VALUE):
    print(f"{Colors.LABEL}{key:<25}{Colors.ENDC} : {color}{value}{Colors.ENDC}")


def run_policy_demo(text: str, policy: str = "priority"):
    print_section("Input")
    print_kv("Weighting Policy", policy)
    print_kv("Characters", len(text))

    try:
        report = analyze_policy(text, policy)
    except PolicyInputError as e:
        print(f"{Colors.FAIL}{e}{Colors.ENDC}")
        return 1

    print_section("Step 1: Rule Evaluation")
    for category, checks in group_checks_by_category(report.checks).items():
        if not checks:
            continue
        print(f"\n{Colors.BOLD}{CATEGORY_TITLES[category]}{Colors.ENDC}")
        for check in checks:
            color = STATUS_COLORS[check.status.value]
            print(f"  [{color}{check.status.value.upper():<4}{Colors.ENDC}] {check.title}")
            print(f"   ├─ {check.description}")
            if check.citation is not None:
                print(f"   ├─ Citation : {check.citation.article_label}")
            if check.fix and check.status.value != "pass":
                print(f"   └─ Fix      : {check.fix}")

    print_section("Step 2: Compliance Score")
    band_color = BAND_COLORS[report.score_band]
    print_kv("Score", f"{report.score}/100", band_color + Colors.BOLD)
    print_kv("Band", report.score_band.upper(), band_color)

    print_section("Step 3: Estimated Fine Exposure")
    risk = report.financial_risk
    if not risk.has_exposure:
        print(f"{Colors.OKGREEN}✔ No exposure estimated.{Colors.ENDC}")
    else:
        for idx, v in enumerate(risk.violations, 1):
            print(f"{idx}. {Colors.BOLD}{v.name}{Colors.ENDC}")
            print(f"   ├─ Range    : EUR {v.min_fine}M - {v.max_fine}M")
            print(f"   └─ Citation : {v.citation_label}")
        print()
        print_kv("Total Exposure", f"EUR {risk.min_exposure}M - {risk.max_exposure}M", Colors.FAIL)
        print_kv("Average Estimate", f"EUR {risk.average_exposure}M")

    print("\nAdvisory only: lexical presence checks, not legal advice.")
    print_separator("=")
    return 0


if __name__ == "__main__":
    if len(sys.argv) > 1:
        policy_text = Path(sys.argv[1]).read_text(encoding="utf-8")
    else:
        policy_text = SAMPLE_POLICY
    weighting = sys.argv[2] if len(sys.argv) > 2 else "priority"
    sys.exit(run_policy_demo(policy_text, weighting))
