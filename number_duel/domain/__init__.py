"""Domain layer (pure logic).

- Keep game rules and number-line calculations here.
- Avoid I/O: no HTTP/FastAPI, no sessions, no schedulers.
- Randomness is passed in as a uniform-deviate callable, never read from a global.
"""
