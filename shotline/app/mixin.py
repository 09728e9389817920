from flask_restful import reqparse
from flask import request

from shotline.app.utils import fields
from shotline.app.services.exception import WrongParameterException


class ArgsMixin(object):
    """
    Helpers to retrieve parameters from GET or POST queries.
    """

    def get_args(self, descriptors, location=None):
        """
        Retrieve arguments from GET or POST queries.
        """
        parser = reqparse.RequestParser()
        if location is None:
            location = ["values", "json"] if request.is_json else ["values"]

        for descriptor in descriptors:
            action = None
            data_type = str
            required = False
            default = None
            help = None

            if isinstance(descriptor, (list, tuple)):
                if len(descriptor) == 4:
                    (name, default, required, data_type) = descriptor
                elif len(descriptor) == 3:
                    (name, default, required) = descriptor
                elif len(descriptor) == 2:
                    (name, default) = descriptor
                else:
                    raise ValueError
            elif isinstance(descriptor, str):
                name = descriptor
            elif isinstance(descriptor, dict):
                name = descriptor.get("name")
                required = descriptor.get("required", required)
                default = descriptor.get("default", default)
                action = descriptor.get("action", action)
                data_type = descriptor.get("type", data_type)
                help = descriptor.get("help", help)

            parser.add_argument(
                name,
                required=required,
                default=default,
                action=action,
                type=data_type,
                help=help,
                location=location,
            )

        return parser.parse_args()

    def get_page(self):
        """
        Returns page requested by the user as an integer.
        """
        return self.get_int_parameter("page", -1)

    def get_limit(self):
        """
        Returns limit requested by the user as an integer.
        """
        return self.get_int_parameter("limit", 0)

    def get_project_id(self):
        return self.get_id_parameter("project_id")

    def get_episode_id(self):
        return self.get_id_parameter("episode_id")

    def get_text_parameter(self, field_name, default=None):
        """
        Returns text parameter value matching `field_name`.
        """
        options = request.args
        return options.get(field_name, default)

    def get_int_parameter(self, field_name, default=None):
        """
        Returns integer parameter value matching `field_name`. It raises a
        WrongParameterException if the value is not an integer.
        """
        value = self.get_text_parameter(field_name)
        if value is None or value == "":
            return default
        try:
            return int(value)
        except ValueError:
            raise WrongParameterException(
                f"{field_name} parameter must be an integer."
            )

    def get_id_parameter(self, field_name):
        """
        Returns ID parameter value matching `field_name` after checking its
        format.
        """
        value = self.get_text_parameter(field_name)
        if value is not None:
            self.check_id_parameter(value)
        return value

    def get_bool_parameter(self, field_name, default="false"):
        """
        Returns bool parameter value matching `field_name`.
        """
        options = request.args
        return options.get(field_name, default).lower() == "true"

    def check_id_parameter(self, uuid):
        """
        Check if the given UUID is valid.
        """
        if not fields.is_valid_id(uuid):
            raise WrongParameterException("Wrong UUID format.")
        return True
