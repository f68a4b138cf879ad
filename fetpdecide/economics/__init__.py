"""Cost models and net-benefit arithmetic around predicted uptake."""
