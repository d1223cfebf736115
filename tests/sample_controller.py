"""Контроллер-заглушка для проверки загрузки по строке импорта"""


def get_tender(request, response):
    return {"id": request.path_params["id"]}


def add_tender(request, response):
    return {"tender": request.path_params["tender"]}


def get_all_tenders(request, response):
    return []


class TenderController:
    def get_tender(self, request, response):
        return get_tender(request, response)

    def add_tender(self, request, response):
        return add_tender(request, response)

    def get_all_tenders(self, request, response):
        return get_all_tenders(request, response)


class PartialController:
    def get_tender(self, request, response):
        return get_tender(request, response)


controller = TenderController()
