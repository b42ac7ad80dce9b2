from fastapi import APIRouter, Request

from ikon_site.api.v1 import inquiries

api_router = APIRouter()

api_router.include_router(inquiries.router)


@api_router.get("/routes", tags=["meta"])
def routes_table(request: Request) -> dict:
    """Method/path pairs the front end uses to reach the API."""
    return {
        "inquiries": {
            "create": {
                "method": "POST",
                "path": request.app.url_path_for("create_inquiry"),
            }
        }
    }
