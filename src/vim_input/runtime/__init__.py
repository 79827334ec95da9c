"""Runtime services shared by the widget (telemetry)."""
