"""
Shared test fixtures and utilities for the layouttree test suite.
"""

import pytest

from layouttree import Component


def _field(data_scope, label, sort_order, **extra):
    """Build a shipping address input field the way checkout layouts declare them."""
    field = {
        "component": "Magento_Ui/js/form/element/abstract",
        "config": {
            "customScope": "shippingAddress",
            "template": "ui/form/field",
            "elementTmpl": "ui/form/element/input",
        },
        "dataScope": data_scope,
        "label": label,
        "provider": "checkoutProvider",
        "sortOrder": sort_order,
        "validation": {
            "required-entry": True,
            "max_text_length": 255,
            "min_text_length": 1,
        },
        "options": [],
        "filterBy": None,
        "customEntry": None,
        "visible": True,
    }
    field.update(extra)
    return field


def onepage_checkout_layout():
    """Return a fresh copy of a onepage checkout layout document."""
    street_line = {
        "component": "Magento_Ui/js/form/element/abstract",
        "config": {
            "customScope": "shippingAddress",
            "template": "ui/form/field",
            "elementTmpl": "ui/form/element/input",
        },
        "provider": "checkoutProvider",
        "validation": {"max_text_length": 255, "min_text_length": 1},
        "additionalClasses": "additional",
    }

    fieldset_children = {
        "region": {"visible": False},
        "region_id": {
            "component": "Magento_Ui/js/form/element/region",
            "config": {
                "customScope": "shippingAddress",
                "template": "ui/form/field",
                "elementTmpl": "ui/form/element/select",
                "customEntry": "shippingAddress.region",
            },
            "dataScope": "shippingAddress.region_id",
            "label": "State/Province",
            "provider": "checkoutProvider",
            "sortOrder": "90",
            "validation": {"required-entry": True},
            "filterBy": {
                "target": "${ $.provider }:${ $.parentScope }.country_id",
                "field": "country_id",
            },
            "customEntry": None,
            "visible": True,
            "deps": ["checkoutProvider"],
            "imports": {
                "initialOptions": "index = checkoutProvider:dictionaries.region_id",
                "setOptions": "index = checkoutProvider:dictionaries.region_id",
            },
        },
        "postcode": _field(
            "shippingAddress.postcode",
            "Zip/Postal Code",
            "110",
            component="Magento_Ui/js/form/element/post-code",
            validation={"required-entry": True},
        ),
        "company": _field(
            "shippingAddress.company",
            "Company",
            "60",
            validation={"max_text_length": 255, "min_text_length": "0"},
        ),
        "fax": {"validation": {"min_text_length": "0"}},
        "telephone": _field(
            "shippingAddress.telephone",
            "Phone Number",
            "120",
            config={
                "customScope": "shippingAddress",
                "template": "ui/form/field",
                "elementTmpl": "ui/form/element/input",
                "tooltip": {"description": "For delivery questions."},
            },
        ),
        "inline-form-manipulator": {
            "component": "Amazon_Payment/js/view/shipping-address/inline-form",
        },
        "firstname": _field(
            "shippingAddress.firstname", "First Name", "20", value="Veronica"
        ),
        "lastname": _field(
            "shippingAddress.lastname", "Last Name", "40", value="Costello"
        ),
        "street": {
            "component": "Magento_Ui/js/form/components/group",
            "label": "Street Address",
            "required": True,
            "dataScope": "shippingAddress.street",
            "provider": "checkoutProvider",
            "sortOrder": "70",
            "type": "group",
            "config": {"template": "ui/group/group", "additionalClasses": "street"},
            "children": {
                "0": {
                    **street_line,
                    "label": "Street Address: Line 1",
                    "dataScope": 0,
                    "validation": {
                        "required-entry": True,
                        "max_text_length": 255,
                        "min_text_length": 1,
                    },
                    "additionalClasses": "field",
                },
                "1": {**street_line, "label": "Street Address: Line 2", "dataScope": 1},
                "2": {**street_line, "label": "Street Address: Line 3", "dataScope": 2},
            },
        },
        "country_id": {
            "component": "Magento_Ui/js/form/element/select",
            "config": {
                "customScope": "shippingAddress",
                "template": "ui/form/field",
                "elementTmpl": "ui/form/element/select",
            },
            "dataScope": "shippingAddress.country_id",
            "label": "Country",
            "provider": "checkoutProvider",
            "sortOrder": "80",
            "validation": {"required-entry": True},
            "filterBy": None,
            "customEntry": None,
            "visible": True,
            "deps": ["checkoutProvider"],
            "imports": {
                "initialOptions": "index = checkoutProvider:dictionaries.country_id",
                "setOptions": "index = checkoutProvider:dictionaries.country_id",
            },
            "value": "US",
        },
        "city": _field("shippingAddress.city", "City", "100"),
    }

    return {
        "components": {
            "checkout": {
                "children": {
                    "steps": {
                        "children": {
                            "shipping-step": {
                                "component": "uiComponent",
                                "sortOrder": "1",
                                "children": {
                                    "step-config": {
                                        "component": "uiComponent",
                                        "children": {
                                            "shipping-rates-validation": {
                                                "children": {
                                                    "flatrate-rates-validation": {
                                                        "component": "Magento_OfflineShipping/js/view/shipping-rates-validation/flatrate",
                                                    },
                                                    "tablerate-rates-validation": {
                                                        "component": "Magento_OfflineShipping/js/view/shipping-rates-validation/tablerate",
                                                    },
                                                },
                                            },
                                        },
                                    },
                                    "shippingAddress": {
                                        "config": {
                                            "deps": [
                                                "checkout.steps.shipping-step.step-config",
                                                "checkoutProvider",
                                            ],
                                            "popUpForm": {
                                                "element": "#opc-new-shipping-address",
                                                "options": {
                                                    "type": "popup",
                                                    "responsive": True,
                                                    "innerScroll": True,
                                                    "title": "Shipping Address",
                                                    "trigger": "opc-new-shipping-address",
                                                    "buttons": {
                                                        "save": {
                                                            "text": "Ship Here",
                                                            "class": "action primary action-save-address",
                                                        },
                                                        "cancel": {
                                                            "text": "Cancel",
                                                            "class": "action secondary action-hide-popup",
                                                        },
                                                    },
                                                },
                                            },
                                        },
                                        "component": "Amazon_Payment/js/view/shipping",
                                        "provider": "checkoutProvider",
                                        "sortOrder": "10",
                                        "children": {
                                            "shipping-address-fieldset": {
                                                "component": "uiComponent",
                                                "config": {"deps": ["checkoutProvider"]},
                                                "displayArea": "additional-fieldsets",
                                                "children": fieldset_children,
                                            },
                                            "price": {
                                                "component": "Magento_Tax/js/view/checkout/shipping_method/price",
                                                "displayArea": "price",
                                            },
                                        },
                                    },
                                },
                            },
                        },
                        "component": "uiComponent",
                        "displayArea": "steps",
                    },
                },
                "component": "uiComponent",
                "config": {"template": "Magento_Checkout/onepage"},
            },
        },
        "types": {
            "form.input": {
                "component": "Magento_Ui/js/form/element/abstract",
                "config": {
                    "provider": "checkoutProvider",
                    "deps": ["checkoutProvider"],
                    "template": "ui/form/field",
                    "elementTmpl": "ui/form/element/input",
                },
            },
        },
    }


FIELDSET_PATH = "steps.shipping-step.shippingAddress.shipping-address-fieldset"


@pytest.fixture
def js_layout():
    """Onepage checkout layout document."""
    return onepage_checkout_layout()


@pytest.fixture
def checkout(js_layout):
    """Root `checkout` component built from the onepage checkout layout."""
    return Component("checkout", js_layout["components"]["checkout"])


@pytest.fixture
def fieldset(checkout):
    """The shipping address fieldset inside the checkout tree.

    Depends on `checkout` so the root stays alive for the whole test.
    """
    return checkout.get_nested_child(FIELDSET_PATH)
