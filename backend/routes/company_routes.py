from __future__ import annotations
from typing import Any, Dict, Optional

from flask import Blueprint, current_app, jsonify, request

from errors import CompanyServiceError, InvalidArgument, NotFound, StoreUnavailable, WriteFailed
from services.company_service import CompanyService

bp = Blueprint("companies", __name__)


def _service() -> CompanyService:
    return current_app.extensions["company_service"]


def _error(message: str, status: int, details: Optional[str] = None):
    payload: Dict[str, Any] = {"error": message}
    if details:
        payload["details"] = details
    return jsonify(payload), status


def _json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidArgument("Request body must be a JSON object")
    return data


@bp.get("/health")
def health():
    """
    Health Check
    ---
    tags: [Meta]
    responses:
      200:
        description: API and DB health
        schema:
          type: object
          properties:
            ok: { type: boolean }
            db_rows: { type: integer }
      500:
        description: Store unavailable
    """
    try:
        total = _service().count()
    except StoreUnavailable as e:
        return _error(e.message, 500)
    return jsonify({"ok": True, "db_rows": total})


@bp.get("/companies")
def list_companies():
    """
    List Companies
    ---
    tags: [Companies]
    responses:
      200:
        description: Every company record, unordered
        schema:
          type: array
          items:
            $ref: '#/definitions/Company'
      500:
        description: Failed to fetch companies
    definitions:
      Company:
        type: object
        properties:
          id: { type: integer }
          companyName: { type: string }
          website: { type: string }
          jobDescriptionUrl: { type: string }
          jobDescriptionText: { type: string }
          contactDate: { type: string, format: date }
          city: { type: string }
          state: { type: string }
          zip: { type: string }
          companyProducts: { type: string }
          companyDescription: { type: string }
          companySize: { type: string }
          companyType: { type: string }
          industry: { type: string }
          foundedYear: { type: string }
          headquarters: { type: string }
          contactEmail: { type: string }
          contactPhone: { type: string }
          applicationStatus:
            type: string
            enum: ["", Applied, Interviewing, Offered, Rejected, Not Applied]
          notes: { type: string }
          createdAt: { type: string, format: date-time }
          updatedAt: { type: string, format: date-time }
    """
    try:
        companies = _service().list()
    except StoreUnavailable as e:
        return _error(e.message, 500)
    return jsonify(companies)


@bp.post("/companies")
def create_company():
    """
    Create Company
    ---
    tags: [Companies]
    parameters:
      - in: body
        name: body
        required: true
        schema:
          $ref: '#/definitions/Company'
    responses:
      200:
        description: Created record with its new id
        schema:
          $ref: '#/definitions/Company'
      400:
        description: Malformed body or date
      500:
        description: Failed to create company
    """
    try:
        created = _service().create(_json_body())
    except InvalidArgument as e:
        return _error(e.message, 400, e.details)
    except WriteFailed as e:
        return _error(e.message, 500, e.details)
    return jsonify(created)


@bp.put("/companies")
def update_company():
    """
    Update Company
    ---
    tags: [Companies]
    parameters:
      - in: body
        name: body
        required: true
        description: id plus the fields to replace
        schema:
          $ref: '#/definitions/Company'
    responses:
      200:
        description: Updated record
        schema:
          $ref: '#/definitions/Company'
      400:
        description: Missing or malformed id
      404:
        description: Not Found
      500:
        description: Failed to update company
    """
    try:
        data = _json_body()
        updated = _service().update(data.get("id"), data)
    except InvalidArgument as e:
        return _error(e.message, 400)
    except NotFound as e:
        return _error(e.message, 404)
    except WriteFailed as e:
        current_app.logger.error("Update failed: %s", e.details)
        return _error(e.message, 500)
    return jsonify(updated)


@bp.delete("/companies")
def delete_company():
    """
    Delete Company
    ---
    tags: [Companies]
    parameters:
      - name: id
        in: query
        type: integer
        required: true
    responses:
      200:
        description: Deleted
        schema:
          type: object
          properties:
            success: { type: boolean }
      400:
        description: ID is required
      404:
        description: Not Found
      500:
        description: Failed to delete company
    """
    try:
        result = _service().delete(request.args.get("id"))
    except InvalidArgument as e:
        return _error(e.message, 400)
    except NotFound as e:
        return _error(e.message, 404)
    except CompanyServiceError as e:
        return _error(e.message, 500)
    return jsonify(result)
