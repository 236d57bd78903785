"""Runtime services (telemetry) shared by rlex components."""
