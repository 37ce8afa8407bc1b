from __future__ import annotations

from gedcom_validator.core.context import ValidationContext
from gedcom_validator.core.exceptions import LoadError, ReportSinkError
from gedcom_validator.loader import load_record_store
from gedcom_validator.reporting import Reporter, open_report_sink, truncate_report
from gedcom_validator.rules import run_rules


class Pipeline:
    """
    Orchestrates one validation session: load, validate, report.
    No rule logic lives here.
    """

    def __init__(self, context: ValidationContext):
        self.ctx = context
        self.log = context.logger

    def load(self):
        try:
            return load_record_store(self.ctx.input_path)
        except Exception as exc:
            self.log.exception("Loading GEDCOM failed")
            raise LoadError(str(exc)) from exc

    def run(self):
        self.log.info("Pipeline starting")

        store = self.load()
        self.ctx.stats["individuals"] = len(store.individuals)
        self.ctx.stats["families"] = len(store.families)

        output_path = self.ctx.output_path or self.ctx.config.report_file
        if not self.ctx.append:
            truncate_report(output_path)

        try:
            with open_report_sink(output_path) as sink:
                findings = run_rules(store, Reporter(sink), self.ctx.rules)
        except ReportSinkError:
            self.log.exception(f"Cannot write report to {output_path}")
            raise

        per_rule = {}
        for finding in findings:
            per_rule[finding.code] = per_rule.get(finding.code, 0) + 1
        self.ctx.stats["findings"] = per_rule
        self.ctx.stats["total_findings"] = len(findings)

        self.log.info(f"Pipeline completed: {len(findings)} finding(s) -> {output_path}")
        return findings
