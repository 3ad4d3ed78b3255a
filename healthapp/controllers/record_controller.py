"""
Uploaded health records (images and documents) and the history view.
"""

from flask import current_app, jsonify, request
from flask_jwt_extended import jwt_required

from healthapp.core import derived
from healthapp.core.session import FILE_TYPE_FILTERS
from healthapp.errors import UploadLimitExceeded, ValidationFailure
from healthapp.helpers import current_health_session


def serialize_file(uploaded, now=None):
    payload = uploaded.to_dict()
    payload["uploadedLabel"] = derived.relative_day_label(uploaded.upload_date, now)
    return payload


def _incoming_files():
    """
    Multipart uploads (``files`` or ``file``), else a JSON body describing one file.
    Returns (fields, size) pairs; size is only ever measured by the ingestor.
    """
    storages = request.files.getlist("files") or request.files.getlist("file")
    if storages:
        ingestor = current_app.extensions["file_ingestor"]
        incoming = []
        for fs in storages:
            fields = ingestor.ingest(fs.filename, fs.read(), fs.mimetype)
            incoming.append((fields, fields.pop("size")))
        return incoming
    data = request.get_json(silent=True) or {}
    return [(data, "")]


@jwt_required()
def list_records():
    session, error = current_health_session()
    if error:
        return error
    return jsonify({
        "success": True,
        "records": [serialize_file(f) for f in session.files.list()],
        "remaining": session.files.remaining(),
    }), 200


@jwt_required()
def upload_records():
    session, error = current_health_session()
    if error:
        return error

    incoming = _incoming_files()
    remaining = session.files.remaining()
    if remaining is not None and len(incoming) > remaining:
        # the whole batch is refused rather than partially stored
        raise UploadLimitExceeded(session.files.capacity)

    stored = []
    try:
        for fields, size in incoming:
            stored.append(session.add_uploaded_file(fields, size=size))
    except ValidationFailure:
        for f in stored:
            session.delete_uploaded_file(f.id)
        raise

    current_app.logger.info(f"Uploaded {len(stored)} record(s) to session {session.id}")
    return jsonify({
        "success": True,
        "message": "File uploaded successfully!",
        "records": [serialize_file(f) for f in stored],
    }), 201


@jwt_required()
def delete_record(record_id):
    session, error = current_health_session()
    if error:
        return error
    removed = session.delete_uploaded_file(record_id)
    return jsonify({"success": True, "message": "Record deleted", "deleted": removed}), 200


@jwt_required()
def record_history():
    """
    Query params: q (name search), type (all|image|document).
    Groups are keyed by long display date, newest first.
    """
    session, error = current_health_session()
    if error:
        return error

    file_type = request.args.get("type", "all")
    if file_type not in FILE_TYPE_FILTERS:
        return jsonify({"success": False, "message": f"Unknown type filter: {file_type}"}), 400

    files = session.search_files(request.args.get("q", ""), file_type)
    groups = session.files_grouped_by_date(files)
    return jsonify({
        "success": True,
        "total": len(files),
        "groups": [
            {"date": label, "records": [serialize_file(f) for f in items]}
            for label, items in groups.items()
        ],
    }), 200
