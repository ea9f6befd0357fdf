from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import get_quote_service
from api.schemas import ConversionResponse, PriceResponse, RateResponse
from application.services import QuoteService

router = APIRouter(prefix='/api', tags=['quotes'])

CurrencyCode = Annotated[str, Path(min_length=3, max_length=5)]
Symbol = Annotated[str, Path(min_length=2, max_length=20)]


@router.get(
	'/price/{symbol}',
	response_model=PriceResponse,
	status_code=status.HTTP_200_OK,
	summary='Get latest crypto price',
)
def get_price(
	symbol: Symbol,
	service: Annotated[QuoteService, Depends(get_quote_service)],
) -> PriceResponse:
	price = service.get_price(symbol.upper())
	return PriceResponse(**asdict(price))


@router.get(
	'/rate/{base_currency}/{quote_currency}',
	response_model=RateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get current fiat exchange rate',
)
def get_rate(
	base_currency: CurrencyCode,
	quote_currency: CurrencyCode,
	service: Annotated[QuoteService, Depends(get_quote_service)],
) -> RateResponse:
	rate = service.get_rate(base_currency.upper(), quote_currency.upper())
	return RateResponse(**asdict(rate))


@router.get(
	'/convert/{symbol}/{base_currency}/{quote_currency}',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert a crypto price into a fiat currency',
)
def convert_price(
	symbol: Symbol,
	base_currency: CurrencyCode,
	quote_currency: CurrencyCode,
	service: Annotated[QuoteService, Depends(get_quote_service)],
) -> ConversionResponse:
	result = service.convert(symbol.upper(), base_currency.upper(), quote_currency.upper())
	return ConversionResponse(
		price=PriceResponse(**asdict(result.price)),
		rate=RateResponse(**asdict(result.rate)),
		converted_amount=result.converted_amount,
	)
