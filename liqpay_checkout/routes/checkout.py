from flask import Blueprint, render_template, request

from liqpay_checkout.errors import ValidationError
from liqpay_checkout.extensions import get_liqpay
from liqpay_checkout.utils.flow_logging import current_request_id

checkout_bp = Blueprint("checkout", __name__)


def _payload_from_request():
    if request.is_json:
        return request.get_json(silent=True)
    return request.form.to_dict()


def _error_page(message):
    return render_template(
        "liqpay/checkout_error.html",
        message=message,
        request_id=current_request_id(),
    ), 400


@checkout_bp.route("/checkout", methods=["POST"])
def checkout():
    """Render a page that posts the signed payment to LiqPay on load."""
    payload = _payload_from_request()
    if not isinstance(payload, dict):
        return _error_page("Request body must be a JSON object")

    try:
        form = get_liqpay().build_html_form(payload)
    except ValidationError as e:
        return _error_page(str(e))

    return render_template("liqpay/checkout_page.html", form=form)
