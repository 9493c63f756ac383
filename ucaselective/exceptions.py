#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# filename: exceptions.py

__all__ = [
    "UCASElectiveException",
    "ConfigError",
    "UCASElectiveClientException",
    "TransportError",
    "StatusCodeError",
    "ServerError",
    "AuthenticationError",
    "IdentityNotFoundError",
    "RoleVerificationError",
    "ManagementIdNotFoundError",
]


class UCASElectiveException(Exception):
    """ Abstract Exception for UCASElective """


class ConfigError(UCASElectiveException, ValueError):
    """ Missing or malformed user input, raised before any request is sent """


class UCASElectiveClientException(UCASElectiveException):

    code = -1
    desc = "UCASElectiveClientException"

    def __init__(self, *args, **kwargs):
        response = kwargs.pop("response", None)
        self.response = response
        msg = "[%d] %s" % (
            self.__class__.code,
            kwargs.pop("msg", self.__class__.desc)
        )
        super().__init__(msg, *args, **kwargs)


class TransportError(UCASElectiveClientException):
    code = -2
    desc = "Request failed before a usable response was received"


class StatusCodeError(TransportError):
    code = -3
    desc = "StatusCodeError"


class ServerError(StatusCodeError):
    code = -4
    desc = "ServerError"


class AuthenticationError(UCASElectiveClientException):
    code = 100
    desc = "Authentication handshake failed"


class IdentityNotFoundError(AuthenticationError):
    code = 101
    desc = "Identity token was not found on the portal page"


class RoleVerificationError(AuthenticationError):
    code = 102
    desc = "Student role marker was not found after course system login"


class ManagementIdNotFoundError(AuthenticationError):
    code = 103
    desc = "Management id was not found on the course manage page"
