# Copyright (c) 2009 Canonical Ltd <duncan.mcgreggor@canonical.com>
# Licenced under the route53client licence available at /LICENSE in the route53client source.

from twisted.web.error import Error

from route53client.util import XML


class UsageError(ValueError):
    """
    The library was called incorrectly, for example without a parameter the
    operation requires.
    """


class UnknownAPIVersion(UsageError):
    """
    The requested Route53 API version is not one this library speaks.
    """


class CredentialsNotFoundError(UsageError):
    """
    An access key id or secret key was not supplied.
    """


class AWSError(Error):
    """
    A base class for errors reported by an AWS service.
    """
    def __init__(self, xml_bytes, status, message=None, response=None):
        super(AWSError, self).__init__(status, message, response)
        if not xml_bytes:
            raise ValueError("XML cannot be empty.")
        self.original = xml_bytes
        self.errors = []
        self.request_id = ""
        self.parse()

    def __str__(self):
        return self._get_error_message_string()

    def __repr__(self):
        return "<%s object with %s>" % (
            self.__class__.__name__, self._get_error_code_string())

    def _set_request_id(self, tree):
        text = _find_text(tree, ("RequestId", "RequestID"))
        if text:
            self.request_id = text

    def _get_error_code_string(self):
        count = len(self.errors)
        error_code = self.get_error_codes()
        if count > 1:
            return "Error count: %s" % error_code
        else:
            return "Error code: %s" % error_code

    def _get_error_message_string(self):
        count = len(self.errors)
        error_message = self.get_error_messages()
        if count > 1:
            return "%s." % error_message
        else:
            return "Error Message: %s" % error_message

    def _node_to_dict(self, node):
        data = {}
        for tag, child in node.items():
            if isinstance(child, str) and child and not tag.startswith("@"):
                data[tag] = child
        return data

    def _check_for_html(self, tree):
        if "html" in tree:
            message = "Could not parse HTML in the response."
            raise AWSResponseParseError(message)

    def _set_400_error(self, tree):
        """
        This method needs to be implemented by subclasses.
        """

    def _set_500_error(self, tree):
        self._set_request_id(tree)
        for node in tree.values():
            if isinstance(node, dict):
                data = self._node_to_dict(node)
                if data:
                    self.errors.append(data)

    def parse(self, xml_bytes=b""):
        if not xml_bytes:
            xml_bytes = self.original
        self.original = xml_bytes
        tree = XML(xml_bytes.strip())
        self._check_for_html(tree)
        self._set_request_id(tree)
        if self.status:
            status = int(self.status)
        else:
            status = 400
        if status >= 500:
            self._set_500_error(tree)
        else:
            self._set_400_error(tree)

    def get_error_codes(self):
        count = len(self.errors)
        if count > 1:
            return count
        elif count == 0:
            return
        else:
            return self.errors[0].get("Code")

    def get_error_messages(self):
        count = len(self.errors)
        if count > 1:
            return "Multiple AWS Errors"
        elif count == 0:
            return "Empty error list"
        else:
            return self.errors[0].get("Message")


class AWSResponseParseError(Exception):
    """
    route53client was unable to parse the server response.
    """


def _find_text(tree, names):
    """
    Search nested mappings depth-first for the text of the first element
    named by one of C{names}.
    """
    for tag, child in tree.items():
        if tag in names and isinstance(child, str):
            return child
        if isinstance(child, dict):
            found = _find_text(child, names)
            if found is not None:
                return found
    return None
