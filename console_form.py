"""
Console booking form - the terminal rendition of the workshop's booking form.

Shows the status banner, the seven booking fields and the submit control,
and runs the real submission pipeline on submit. With --offline no email
is sent and the WhatsApp link is printed instead of opened.

Usage:
    python console_form.py
    python console_form.py --offline
    python console_form.py --offline --scenario booking
"""

import argparse
import asyncio
from typing import Optional

from motorserve.booking import FormState, SubmissionPipeline
from motorserve.clients import EmailJSClient, OfflineEmailClient, open_in_browser, print_link
from motorserve.clients.emailjs_client import EmailDispatcher
from motorserve.config import AppConfig, settings
from motorserve.messages.status_messages import (
    FIELD_PLACEHOLDERS,
    FORM_TITLE,
    SUBMIT_BUSY_CAPTION,
    SUBMIT_IDLE_CAPTION,
)
from motorserve.schemas.booking_schema import ServiceType, VehicleType

BLUE = "\033[94m"
GREEN = "\033[92m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"

SELECT_OPTIONS: dict[str, list[str]] = {
    "vehicle_type": [v.value for v in VehicleType],
    "service_type": [s.value for s in ServiceType],
}


def submit_caption(sending: bool) -> str:
    return SUBMIT_BUSY_CAPTION if sending else SUBMIT_IDLE_CAPTION


def resolve_option(field_name: str, raw: str) -> Optional[str]:
    """Map a menu number or option text to the option value, or None."""
    options = SELECT_OPTIONS[field_name]
    raw = raw.strip()
    if raw.isdigit() and 1 <= int(raw) <= len(options):
        return options[int(raw) - 1]
    for option in options:
        if option.lower() == raw.lower():
            return option
    return None


class ConsoleForm:
    """Interactive booking form bound to one FormState and pipeline."""

    # Pre-scripted field values for --scenario
    SCENARIOS: dict[str, dict[str, str]] = {
        "booking": {
            "customer_name": "Jane Doe",
            "customer_phone": "0712345678",
            "vehicle_type": "Motorcycle",
            "service_type": "Diagnostics",
            "datetime": "2024-05-01T10:00",
        },
        "missing-datetime": {
            "customer_name": "Jane Doe",
            "customer_phone": "0712345678",
        },
    }

    def __init__(self, pipeline: SubmissionPipeline, config: AppConfig = settings) -> None:
        self.pipeline = pipeline
        self.state = pipeline.form_state
        self.config = config

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def render_banner(self) -> None:
        status = self.state.status
        if status is None:
            return
        color = RED if status.is_error else GREEN
        print(f"{color}{BOLD}{status.message}{RESET}")

    def render(self) -> None:
        print()
        print(f"{BOLD}{FORM_TITLE}{RESET}")
        self.render_banner()
        draft = self.state.draft
        for index, name in enumerate(FormState.FIELD_NAMES, start=1):
            value = getattr(draft, name)
            shown = value if value else f"{DIM}{FIELD_PLACEHOLDERS[name]}{RESET}"
            print(f"  {index}. {FIELD_PLACEHOLDERS[name]:<40} {shown}")
        state = "disabled" if self.state.sending else "s"
        print(f"  [{state}] {BOLD}{submit_caption(self.state.sending)}{RESET}")

    def edit_field(self, name: str, raw: str) -> bool:
        """Apply user input to a field. Select fields only accept listed options."""
        if name in SELECT_OPTIONS:
            value = resolve_option(name, raw)
            if value is None:
                self.system_log(f"Choose one of: {', '.join(SELECT_OPTIONS[name])}")
                return False
            self.state.set_field(name, value)
            return True
        self.state.set_field(name, raw)
        return True

    async def submit(self) -> None:
        task = asyncio.create_task(self.pipeline.submit())
        await asyncio.sleep(0)
        if self.state.sending:
            print(f"  [disabled] {BOLD}{submit_caption(True)}{RESET}")
        await task
        self.render_banner()

    async def _ask(self, prompt: str) -> str:
        return (await asyncio.to_thread(input, prompt)).strip()

    async def _prompt_field(self, name: str) -> None:
        if name in SELECT_OPTIONS:
            for i, option in enumerate(SELECT_OPTIONS[name], start=1):
                print(f"     {i}) {option}")
        raw = await self._ask(f"{BLUE}{FIELD_PLACEHOLDERS[name]}: {RESET}")
        self.edit_field(name, raw)

    async def run(self) -> None:
        self._print_header("Type a field number to edit, 's' to submit, 'q' to quit")
        while True:
            self.render()
            choice = (await self._ask(f"\n{BLUE}> {RESET}")).lower()
            if choice in ("q", "quit", "exit"):
                print(f"\n{DIM}Session ended.{RESET}")
                return
            if choice == "s":
                await self.submit()
                continue
            if choice.isdigit() and 1 <= int(choice) <= len(FormState.FIELD_NAMES):
                await self._prompt_field(FormState.FIELD_NAMES[int(choice) - 1])
                continue
            self.system_log(f"Unknown command: {choice!r}")

    async def run_scenario(self, scenario: str) -> None:
        """Auto-fill the form from a script and submit it once."""
        values = self.SCENARIOS.get(scenario)
        if values is None:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return
        self._print_header(f"Scenario: {scenario}")
        for name, value in values.items():
            self.edit_field(name, value)
        self.render()
        await self.submit()
        self.system_log(f"State trace: {' -> '.join(self.pipeline.state_machine.get_state_trace())}")

    def _print_header(self, subtitle: str) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {self.config.workshop.name}{RESET}")
        print(f"{BOLD}  {self.config.workshop.tagline}{RESET}")
        print(f"{BOLD}  {subtitle}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")


async def run_form(offline: bool, scenario: Optional[str] = None, config: AppConfig = settings) -> None:
    """Build the pipeline for live or offline use and run the form."""
    dispatcher: EmailDispatcher
    if offline:
        dispatcher, opener = OfflineEmailClient(delay_sec=0.5), print_link
    else:
        dispatcher, opener = EmailJSClient(config.email), open_in_browser

    pipeline = SubmissionPipeline(config, FormState(), dispatcher, open_external_link=opener)
    form = ConsoleForm(pipeline, config)
    try:
        if scenario:
            await form.run_scenario(scenario)
        else:
            await form.run()
    finally:
        if isinstance(dispatcher, EmailJSClient):
            await dispatcher.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Console booking form")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Record bookings locally and print the WhatsApp link instead of opening it",
    )
    parser.add_argument(
        "--scenario",
        choices=sorted(ConsoleForm.SCENARIOS),
        default=None,
        help="Auto-fill and submit a pre-scripted booking instead of interactive mode",
    )
    args = parser.parse_args()
    asyncio.run(run_form(args.offline, args.scenario))


if __name__ == "__main__":
    main()
