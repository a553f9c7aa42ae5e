"""Event handler entry points.

Each module exposes ``lambda_handler(event, context)``, taking the JSON
object supplied by the calling workflow and returning a
``{"statusCode": 200, "body": "<json>"}`` envelope.
"""
