"""
Houses the tests for the service layer of the program. This layer computes the reports from whatever rental
provider it is given, and is what the views speak through.

The tests run on aiohttp's pytest plugin, so asynchronous tests are plain ``async def`` functions. The
providers are exercised against an in-memory store and an in-memory sqlite database.
"""
