"""
Houses the tests for the REST api layer of the program.

The views are driven through the aiohttp test client against a real
:class:`~autolink.service.ReportService`, backed by an in-memory provider
(or an in-memory sqlite database). The tests assert that the shape of the
responses remains stable and that failures are mapped to JSend errors.
"""
