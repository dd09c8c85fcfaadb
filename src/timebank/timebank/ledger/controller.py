from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/upload-ponto", methods=["POST"], endpoint="upload_ponto")
    def upload_ponto():
        """Receive a punch receipt PDF and record it into the employee's ledger."""
        file = request.files.get("pdf")
        if file is None or not file.filename:
            return jsonify({"erro": "Arquivo PDF não enviado."}), 400

        try:
            extracted = container.extractor.extract(file.read())
            ledger = container.ledger_service.record_extracted(extracted)
        except ValidationError as e:
            return jsonify({"erro": str(e)}), 400
        except Exception as e:
            logger.exception("Failed to process uploaded punch receipt %s", file.filename)
            return jsonify({"erro": "Falha ao processar PDF", "detalhes": str(e)}), 500

        return jsonify({"sucesso": True, "dados": ledger.to_document()}), 200

    @app.route("/ledgers/<employee_id>", methods=["GET"], endpoint="get_ledger")
    def get_ledger(employee_id: str):
        try:
            ledger = container.ledger_service.get_ledger(employee_id)
        except ValidationError as e:
            return jsonify({"erro": str(e)}), 400
        except Exception as e:
            logger.exception("Failed to load ledger %s", employee_id)
            return jsonify({"erro": "Falha ao carregar banco de horas", "detalhes": str(e)}), 500

        if ledger is None:
            return jsonify({"erro": "Colaborador não encontrado."}), 404
        return jsonify(ledger.to_document()), 200
