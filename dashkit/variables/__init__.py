"""Constant, custom, datasource, interval and query template variables."""