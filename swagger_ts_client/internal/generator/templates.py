class Templates:
    """Шаблоны для генерации файлов"""

    io_ts_import = "import * as t from 'io-ts';"

    client = """import { LiveData } from '@devexperts/rx-utils/dist/rd/live-data.utils';
import { Errors, mixed } from 'io-ts';

export type TAPIRequest = {
	url: string;
	query?: object;
	body?: object;
};

export type TFullAPIRequest = TAPIRequest & {
	method: 'GET' | 'POST' | 'PUT' | 'DELETE' | 'PATCH' | 'HEAD' | 'OPTIONS';
};

export type TAPIClient = {
	readonly request: (request: TFullAPIRequest) => LiveData<Error, mixed>;
};

export class ResponseValidationError extends Error {
	static create(errors: Errors): ResponseValidationError {
		return new ResponseValidationError(errors);
	}

	constructor(readonly errors: Errors) {
		super('ResponseValidationError');
		Object.setPrototypeOf(this, ResponseValidationError.prototype);
	}
}"""

    definition = """export type {name} = {type};
export const {io_name} = {io};"""

    controller = """export type {name} = {{
{type}}};

export const {factory_name} = asks((e: {{ apiClient: TAPIClient }}): {name} => ({{
{io}}}));"""


templates = Templates()
