"""Car rental reservations: booking lifecycle and fee calculation."""
