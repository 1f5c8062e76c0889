# cargo_loader
# Load goods onto a carrier and report what the trip is worth.
